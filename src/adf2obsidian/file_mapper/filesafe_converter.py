"""Filesafe note names for Confluence page titles.

This module converts Confluence page titles into names that are valid on all
file systems while keeping them readable as Obsidian note titles.
"""

import re
from typing import Set


class FilesafeConverter:
    """Converts Confluence page titles to filesafe note names.

    Conversion rules:
    - Special characters (\\, /, :, *, ?, ", <, >, |) → hyphens (-)
    - Runs of whitespace → a single space
    - Leading/trailing whitespace → trimmed
    - Empty result → "Untitled"
    - Case and ordinary spaces are preserved (Obsidian links by title)

    Examples:
        - "Customer Feedback" → "Customer Feedback"
        - "API Reference: Getting Started" → "API Reference- Getting Started"
        - "Q/A  Session" → "Q-A Session"
    """

    UNSAFE_CHARS = re.compile(r'[\\/:*?"<>|]')
    WHITESPACE = re.compile(r'\s+')
    FALLBACK_TITLE = 'Untitled'

    @classmethod
    def sanitize_title(cls, title: str) -> str:
        """Convert a Confluence page title to a filesafe note name.

        Args:
            title: The Confluence page title

        Returns:
            A filesafe name without extension

        Examples:
            >>> FilesafeConverter.sanitize_title("Customer Feedback")
            'Customer Feedback'
            >>> FilesafeConverter.sanitize_title("a/b:c")
            'a-b-c'
            >>> FilesafeConverter.sanitize_title("  ")
            'Untitled'
        """
        name = cls.UNSAFE_CHARS.sub('-', title or '')
        name = cls.WHITESPACE.sub(' ', name).strip()

        # "." and ".." are not usable as file or folder names
        if not name or set(name) == {'.'}:
            return cls.FALLBACK_TITLE
        return name

    @staticmethod
    def unique_name(name: str, taken: Set[str]) -> str:
        """Return name, or the first free "name (N)" variant, and reserve it.

        Comparison is case-insensitive so siblings stay distinct on
        case-insensitive file systems.

        Args:
            name: Sanitized note name
            taken: Lower-cased names already used by siblings (updated in place)

        Returns:
            A name not yet present in taken

        Examples:
            >>> taken = set()
            >>> FilesafeConverter.unique_name("Notes", taken)
            'Notes'
            >>> FilesafeConverter.unique_name("Notes", taken)
            'Notes (2)'
        """
        candidate = name
        counter = 2
        while candidate.lower() in taken:
            candidate = f"{name} ({counter})"
            counter += 1

        taken.add(candidate.lower())
        return candidate
