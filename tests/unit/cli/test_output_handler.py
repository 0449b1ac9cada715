"""Unit tests for cli.output module."""

from unittest.mock import MagicMock, Mock, patch

from adf2obsidian.cli.output import OutputHandler
from adf2obsidian.file_mapper.models import ExportResult


def handler_with_mock_console(verbosity=0):
    handler = OutputHandler(verbosity=verbosity)
    handler.console = Mock()
    return handler


def printed(console):
    return [str(c) for c in console.print.call_args_list]


class TestOutputHandlerInit:
    """Test cases for OutputHandler initialization."""

    def test_init_default_verbosity_and_color(self):
        """Initialize with default verbosity (0) and color enabled."""
        handler = OutputHandler()

        assert handler.verbosity == 0
        assert handler.console is not None
        assert handler.console.no_color is False

    def test_init_no_color_true(self):
        """Initialize with no_color=True disables colors."""
        handler = OutputHandler(no_color=True)

        assert handler.console.no_color is True

    def test_console_writes_to_stderr(self):
        """Status output never mixes with Markdown on stdout."""
        assert OutputHandler().console.stderr is True


class TestOutputHandlerMessages:
    """Test cases for message output methods."""

    def test_success_displays_green_message(self):
        """success() displays message with green checkmark."""
        handler = handler_with_mock_console()

        handler.success("Operation completed")

        handler.console.print.assert_called_once_with("[green]✓[/green] Operation completed")

    def test_error_displays_red_message(self):
        """error() displays message with red X."""
        handler = handler_with_mock_console()

        handler.error("Something failed")

        handler.console.print.assert_called_once_with(
            "[red]✗[/red] Something failed",
            style="red"
        )

    def test_warning_displays_yellow_message(self):
        handler = handler_with_mock_console()

        handler.warning("Careful")

        handler.console.print.assert_called_once_with(
            "[yellow]⚠[/yellow] Careful",
            style="yellow"
        )


class TestOutputHandlerVerbosity:
    """Test cases for verbosity-gated messages."""

    def test_info_displays_at_verbosity_1(self):
        handler = handler_with_mock_console(verbosity=1)
        handler.info("Loaded")
        handler.console.print.assert_called_once_with("Loaded")

    def test_info_does_not_display_at_verbosity_0(self):
        handler = handler_with_mock_console(verbosity=0)
        handler.info("Loaded")
        handler.console.print.assert_not_called()

    def test_debug_displays_at_verbosity_2(self):
        handler = handler_with_mock_console(verbosity=2)
        handler.debug("Details")
        handler.console.print.assert_called_once_with("[dim]Details[/dim]")

    def test_debug_does_not_display_at_verbosity_1(self):
        handler = handler_with_mock_console(verbosity=1)
        handler.debug("Details")
        handler.console.print.assert_not_called()


class TestOutputHandlerSpinner:
    """Test cases for spinner context manager."""

    @patch('adf2obsidian.cli.output.Live')
    @patch('adf2obsidian.cli.output.Spinner')
    def test_spinner_creates_live_spinner(self, mock_spinner_class, mock_live_class):
        """spinner() creates Live spinner with correct message on a terminal."""
        mock_spinner = Mock()
        mock_spinner_class.return_value = mock_spinner
        mock_live = MagicMock()
        mock_live_class.return_value = mock_live

        handler = OutputHandler()
        handler.console = Mock(is_terminal=True)

        with handler.spinner("Exporting..."):
            pass

        mock_spinner_class.assert_called_once_with("dots", text="Exporting...")
        mock_live_class.assert_called_once_with(
            mock_spinner,
            console=handler.console,
            refresh_per_second=10
        )
        mock_live.__enter__.assert_called_once()
        mock_live.__exit__.assert_called_once()

    @patch('adf2obsidian.cli.output.Live')
    def test_spinner_skipped_without_terminal(self, mock_live_class):
        """spinner() is a plain context when output is redirected."""
        handler = OutputHandler()
        handler.console = Mock(is_terminal=False)

        with handler.spinner("Exporting..."):
            executed = True

        assert executed
        mock_live_class.assert_not_called()


class TestOutputHandlerExportSummary:
    """Test cases for print_export_summary() method."""

    def test_summary_all_categories(self):
        """print_export_summary() displays created, overwritten and empty counts."""
        handler = handler_with_mock_console()
        result = ExportResult(
            written_files=["a.md", "b.md", "c.md"],
            overwritten_files=["a.md"],
            empty_pages=["3"],
        )

        handler.print_export_summary(result, "vault")

        calls = printed(handler.console)
        assert any("Export Summary" in c for c in calls)
        assert any("Created: 2 note(s)" in c for c in calls)
        assert any("Overwritten: 1 note(s)" in c for c in calls)
        assert any("Empty: 1 page(s)" in c for c in calls)
        assert any("Exported 3 page(s) to vault" in c for c in calls)

    def test_summary_skips_zero_categories(self):
        handler = handler_with_mock_console()

        handler.print_export_summary(ExportResult(written_files=["a.md"]), "vault")

        calls = printed(handler.console)
        assert any("Created: 1 note(s)" in c for c in calls)
        assert not any("Overwritten" in c for c in calls)
        assert not any("Empty" in c for c in calls)

    def test_summary_no_pages(self):
        handler = handler_with_mock_console()

        handler.print_export_summary(ExportResult(), "vault")

        calls = printed(handler.console)
        assert any("No pages to export" in c for c in calls)
        assert not any("Exported" in c for c in calls)
