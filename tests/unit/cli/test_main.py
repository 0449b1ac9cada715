"""Unit tests for main CLI entry point (main.py).

Tests the Typer CLI application using CliRunner.
"""

import json
import logging
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from adf2obsidian import __version__
from adf2obsidian.cli.main import _configure_logging, app
from adf2obsidian.cli.models import ExitCode
from adf2obsidian.file_mapper.config_loader import ConfigLoader
from tests.fixtures.adf_fixtures import create_adf_doc, create_heading, create_paragraph


runner = CliRunner()

HEADING_DOC = create_adf_doc([create_heading("Hi", level=2)])


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every command in an empty directory without .env or overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(ConfigLoader.ENV_INCLUDE_COMMENTS, raising=False)
    monkeypatch.delenv(ConfigLoader.ENV_MEDIA_URL_TEMPLATE, raising=False)
    with patch("adf2obsidian.file_mapper.config_loader.load_dotenv"):
        yield tmp_path


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def api_page(page_id, title, parent_id=None, text="Body"):
    return {
        "id": page_id,
        "title": title,
        "parentId": parent_id,
        "status": "current",
        "body": {"atlas_doc_format": {"value": json.dumps(create_adf_doc([create_paragraph(text)]))}},
    }


class TestConfigureLogging:
    """Test cases for _configure_logging function."""

    def test_verbosity_0_sets_warning_level(self):
        """Verbosity 0 sets logging to WARNING level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_app_logger = MagicMock()
            mock_get_logger.return_value = mock_app_logger

            _configure_logging(0)

            mock_get_logger.assert_called_with("adf2obsidian")
            mock_app_logger.setLevel.assert_called_with(logging.WARNING)

    def test_verbosity_1_sets_info_level(self):
        """Verbosity 1 sets logging to INFO level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_app_logger = MagicMock()
            mock_get_logger.return_value = mock_app_logger

            _configure_logging(1)

            mock_app_logger.setLevel.assert_called_with(logging.INFO)

    def test_verbosity_2_sets_debug_level(self):
        """Verbosity 2+ sets logging to DEBUG level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_app_logger = MagicMock()
            mock_get_logger.return_value = mock_app_logger

            _configure_logging(3)

            mock_app_logger.setLevel.assert_called_with(logging.DEBUG)

    def test_repeated_calls_keep_one_handler(self):
        """Configuring twice does not duplicate log output."""
        _configure_logging(1)
        _configure_logging(1)

        assert len(logging.getLogger("adf2obsidian").handlers) == 1

    def test_root_logger_untouched(self):
        root_handlers = list(logging.getLogger().handlers)
        _configure_logging(2)
        assert logging.getLogger().handlers == root_handlers


class TestVersionAndUsage:
    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"adf2obsidian version {__version__}" in result.output

    def test_missing_input(self):
        result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.GENERAL_ERROR
        assert "Missing argument" in result.output

    def test_help(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "--vault" in result.output


class TestConvertCommand:
    """Test cases for single document conversion."""

    def test_convert_to_stdout(self, isolated_env):
        path = write_json(isolated_env / "page.json", HEADING_DOC)

        result = runner.invoke(app, [path])

        assert result.exit_code == ExitCode.SUCCESS
        assert result.stdout == "## Hi\n"

    def test_convert_from_stdin(self):
        result = runner.invoke(app, ["-"], input=json.dumps(HEADING_DOC))

        assert result.exit_code == 0
        assert result.stdout == "## Hi\n"

    def test_convert_to_file(self, isolated_env):
        path = write_json(isolated_env / "page.json", HEADING_DOC)
        out = isolated_env / "page.md"

        result = runner.invoke(app, [path, "--output", str(out)])

        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == "## Hi\n"
        assert "Converted" in result.output

    def test_no_comments_flag(self, isolated_env):
        doc = create_adf_doc([create_paragraph("x"), {"type": "sparkle"}])
        path = write_json(isolated_env / "page.json", doc)

        with_comments = runner.invoke(app, [path])
        without_comments = runner.invoke(app, [path, "--no-comments"])

        assert "<!-- Unsupported ADF node: sparkle -->" in with_comments.stdout
        assert without_comments.stdout == "x\n"

    def test_config_file_applies(self, isolated_env):
        doc = create_adf_doc([create_paragraph({"type": "mention", "attrs": {"id": "u1"}})])
        path = write_json(isolated_env / "page.json", doc)
        config = isolated_env / "config.yaml"
        config.write_text('mentions:\n  u1: "Jane Doe"\n')

        result = runner.invoke(app, [path, "--config", str(config)])

        assert result.exit_code == 0
        assert result.stdout == "@Jane Doe\n"

    def test_env_override_applies(self, isolated_env, monkeypatch):
        doc = create_adf_doc([{"type": "sparkle"}, create_paragraph("x")])
        path = write_json(isolated_env / "page.json", doc)
        monkeypatch.setenv(ConfigLoader.ENV_INCLUDE_COMMENTS, "false")

        result = runner.invoke(app, [path])

        assert result.stdout == "x\n"

    def test_invalid_json(self, isolated_env):
        path = isolated_env / "page.json"
        path.write_text("{not json")

        result = runner.invoke(app, [str(path)])

        assert result.exit_code == ExitCode.GENERAL_ERROR
        assert "Cannot parse ADF document" in result.output

    def test_not_a_document_is_empty_with_warning(self, isolated_env):
        path = write_json(isolated_env / "page.json", {"type": "paragraph"})

        result = runner.invoke(app, [path])

        assert result.exit_code == 0
        assert "not an ADF document" in " ".join(result.output.split())

    def test_missing_input_file(self):
        result = runner.invoke(app, ["missing.json"])

        assert result.exit_code == ExitCode.GENERAL_ERROR
        assert "Input file not found" in result.output

    def test_missing_config_file(self, isolated_env):
        path = write_json(isolated_env / "page.json", HEADING_DOC)

        result = runner.invoke(app, [path, "--config", "nope.yaml"])

        assert result.exit_code == ExitCode.GENERAL_ERROR
        assert "Input file not found" in result.output

    def test_invalid_config(self, isolated_env):
        path = write_json(isolated_env / "page.json", HEADING_DOC)
        config = isolated_env / "config.yaml"
        config.write_text("max_depth: -1\n")

        result = runner.invoke(app, [path, "--config", str(config)])

        assert result.exit_code == ExitCode.GENERAL_ERROR
        assert "max_depth" in result.output


class TestExportCommand:
    """Test cases for page dump export into a vault."""

    def test_export_dump(self, isolated_env):
        dump = write_json(isolated_env / "pages.json", {"results": [
            api_page("1", "Home", text="Welcome"),
            api_page("2", "Child", parent_id="1", text="Hello"),
        ]})
        vault = isolated_env / "vault"

        result = runner.invoke(app, [dump, "--vault", str(vault)])

        assert result.exit_code == ExitCode.SUCCESS
        assert (vault / "Home" / "index.md").read_text(encoding="utf-8") == "Welcome\n"
        assert (vault / "Home" / "Child.md").read_text(encoding="utf-8") == "Hello\n"
        assert "Exported 2 page(s)" in result.output

    def test_export_from_stdin(self, isolated_env):
        vault = isolated_env / "vault"

        result = runner.invoke(
            app, ["-", "--vault", str(vault)], input=json.dumps([api_page("1", "Home")])
        )

        assert result.exit_code == 0
        assert (vault / "Home.md").exists()

    def test_export_with_frontmatter_config(self, isolated_env):
        dump = write_json(isolated_env / "pages.json", [api_page("42", "Home")])
        (isolated_env / ConfigLoader.DEFAULT_CONFIG_FILE).write_text("frontmatter: true\n")
        vault = isolated_env / "vault"

        result = runner.invoke(app, [dump, "--vault", str(vault)])

        assert result.exit_code == 0
        assert (vault / "Home.md").read_text().startswith("---\nconfluence_page_id: '42'\n")

    def test_export_invalid_dump(self, isolated_env):
        dump = write_json(isolated_env / "pages.json", {"pages": []})

        result = runner.invoke(app, [dump, "--vault", str(isolated_env / "vault")])

        assert result.exit_code == ExitCode.GENERAL_ERROR
        assert "Page dump error" in result.output

    def test_export_invalid_stdin(self, isolated_env):
        result = runner.invoke(app, ["-", "--vault", str(isolated_env / "vault")], input="nope")

        assert result.exit_code == ExitCode.GENERAL_ERROR
        assert "Invalid JSON" in result.output

    def test_export_empty_dump(self, isolated_env):
        dump = write_json(isolated_env / "pages.json", [])

        result = runner.invoke(app, [dump, "--vault", str(isolated_env / "vault")])

        assert result.exit_code == 0
        assert "No pages to export" in result.output

    def test_output_and_vault_are_exclusive(self, isolated_env):
        dump = write_json(isolated_env / "pages.json", [])

        result = runner.invoke(app, [dump, "--vault", "v", "--output", "o.md"])

        assert result.exit_code == ExitCode.GENERAL_ERROR
        assert "cannot be combined" in result.output

    def test_duplicate_ids_reported(self, isolated_env):
        dump = write_json(isolated_env / "pages.json", [api_page("1", "Home"), api_page("1", "Copy")])
        vault = isolated_env / "vault"

        result = runner.invoke(app, [dump, "--vault", str(vault)])

        assert result.exit_code == 0
        assert "Skipped 1 page(s) with duplicate ids" in result.output
        assert "Exported 1 page(s)" in result.output
        assert not (vault / "Copy.md").exists()


class TestUnexpectedErrors:
    def test_unexpected_exception_is_reported(self, isolated_env):
        path = write_json(isolated_env / "page.json", HEADING_DOC)

        with patch("adf2obsidian.cli.main.AdfToMarkdownConverter", side_effect=RuntimeError("boom")):
            result = runner.invoke(app, [path])

        assert result.exit_code == ExitCode.GENERAL_ERROR
        assert "Unexpected error: boom" in result.output


class TestExitCode:
    def test_values(self):
        assert ExitCode.SUCCESS == 0
        assert ExitCode.GENERAL_ERROR == 1
