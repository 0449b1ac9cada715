"""Unit tests for file_mapper.filesafe_converter module."""

import pytest

from adf2obsidian.file_mapper.filesafe_converter import FilesafeConverter


class TestSanitizeTitle:
    """Test cases for FilesafeConverter.sanitize_title()."""

    def test_plain_title_unchanged(self):
        """Case and ordinary spaces are preserved."""
        assert FilesafeConverter.sanitize_title("Customer Feedback") == "Customer Feedback"

    @pytest.mark.parametrize("char", list('\\/:*?"<>|'))
    def test_unsafe_characters_become_hyphens(self, char):
        assert FilesafeConverter.sanitize_title(f"a{char}b") == "a-b"

    def test_colon_with_space(self):
        assert FilesafeConverter.sanitize_title("API Reference: Getting Started") == "API Reference- Getting Started"

    def test_whitespace_collapsed_and_trimmed(self):
        assert FilesafeConverter.sanitize_title("  Q&A \t  Session\n") == "Q&A Session"

    @pytest.mark.parametrize("title", ["", "   ", None, ".", ".."])
    def test_empty_or_unusable_title(self, title):
        assert FilesafeConverter.sanitize_title(title) == "Untitled"

    def test_only_unsafe_characters(self):
        assert FilesafeConverter.sanitize_title("///") == "---"

    def test_unicode_preserved(self):
        assert FilesafeConverter.sanitize_title("Café Übersicht") == "Café Übersicht"


class TestUniqueName:
    """Test cases for FilesafeConverter.unique_name()."""

    def test_first_use_is_unchanged(self):
        taken = set()
        assert FilesafeConverter.unique_name("Notes", taken) == "Notes"
        assert taken == {"notes"}

    def test_duplicates_are_numbered(self):
        taken = set()
        names = [FilesafeConverter.unique_name("Notes", taken) for _ in range(3)]
        assert names == ["Notes", "Notes (2)", "Notes (3)"]

    def test_comparison_ignores_case(self):
        taken = set()
        FilesafeConverter.unique_name("Notes", taken)
        assert FilesafeConverter.unique_name("NOTES", taken) == "NOTES (2)"

    def test_reserved_names(self):
        assert FilesafeConverter.unique_name("index", {"index"}) == "index (2)"
