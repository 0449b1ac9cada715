"""Main CLI entry point for the adf2obsidian command.

This module provides the Typer application that serves as the entry point
for the adf2obsidian command-line tool. It uses options on the main command
rather than subcommands: a single ADF document is converted to Markdown, or,
with --vault, a page dump is exported into an Obsidian vault.
"""

import json
import logging
import os
import sys
from typing import Optional

import typer

from adf2obsidian import __version__
from adf2obsidian.adf_converter.adf_parser import AdfParser
from adf2obsidian.adf_converter.errors import Adf2ObsidianError
from adf2obsidian.adf_converter.markdown_converter import AdfToMarkdownConverter
from adf2obsidian.cli.errors import InputNotFoundError
from adf2obsidian.cli.models import ExitCode
from adf2obsidian.cli.output import OutputHandler
from adf2obsidian.file_mapper.config_loader import ConfigLoader
from adf2obsidian.file_mapper.errors import FilesystemError, PageDumpError
from adf2obsidian.file_mapper.hierarchy_builder import HierarchyBuilder
from adf2obsidian.file_mapper.models import ExportConfig
from adf2obsidian.file_mapper.page_loader import PageLoader
from adf2obsidian.file_mapper.vault_writer import VaultWriter

# Create Typer app
app = typer.Typer(
    name="adf2obsidian",
    help="""Convert Atlassian Document Format (ADF) to Obsidian Markdown.

QUICK START:
  adf2obsidian page.json                     # Print Markdown to stdout
  adf2obsidian page.json -o page.md          # Write Markdown to a file
  cat page.json | adf2obsidian -             # Read ADF from stdin
  adf2obsidian pages.json --vault ./vault    # Export a page dump into a vault""",
    add_completion=False,
    rich_markup_mode=None,  # Disable Rich markup to avoid compatibility issues
)

# Module logger
logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def _configure_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'adf2obsidian' namespace logger to avoid affecting
    third-party libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
    """
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("adf2obsidian")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    # Replace handlers from an earlier invocation in the same process
    app_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)


def _read_input(input_path: str) -> str:
    """Read the input document from a path, or stdin for "-".

    Raises:
        InputNotFoundError: If the path does not exist
        FilesystemError: If the file cannot be read
    """
    if input_path == STDIN_MARKER:
        return typer.get_text_stream("stdin").read()

    if not os.path.exists(input_path):
        raise InputNotFoundError(input_path)

    try:
        with open(input_path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        raise FilesystemError(input_path, 'read', str(e))


def _load_config(
    config_path: Optional[str],
    no_comments: bool,
    output: OutputHandler
) -> ExportConfig:
    """Load configuration, apply environment overrides and CLI flags."""
    if config_path is not None and not os.path.exists(config_path):
        raise InputNotFoundError(config_path)

    config = ConfigLoader.load_or_default(config_path)
    if no_comments:
        config.include_unsupported_comments = False

    output.debug(
        f"Config: comments={config.include_unsupported_comments}, "
        f"max_depth={config.max_depth}, frontmatter={config.frontmatter}"
    )
    return config


def _run_convert(
    input_path: str,
    output_path: Optional[str],
    config: ExportConfig,
    output: OutputHandler
) -> None:
    """Convert a single ADF document."""
    source = "<stdin>" if input_path == STDIN_MARKER else input_path
    text = _read_input(input_path)

    document = AdfParser().parse_from_string(text, source=source)
    if document is None:
        output.warning(f"{source} is not an ADF document (expected type 'doc' with content); output is empty")
        markdown = ""
    else:
        converter = AdfToMarkdownConverter(config.to_options())
        markdown = converter.convert(document)

    if output_path is None:
        typer.echo(markdown)
        return

    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(f"{markdown}\n" if markdown else "")
    except OSError as e:
        raise FilesystemError(output_path, 'write', str(e))

    logger.info(f"Wrote {output_path}")
    output.success(f"Converted {source} → {output_path}")


def _run_export(
    input_path: str,
    vault_dir: str,
    config: ExportConfig,
    output: OutputHandler
) -> None:
    """Export a page dump into a vault directory."""
    if input_path == STDIN_MARKER:
        try:
            data = json.loads(_read_input(input_path))
        except json.JSONDecodeError as e:
            raise PageDumpError("<stdin>", f"Invalid JSON: {e}")
        pages = PageLoader.parse(data, source="<stdin>")
    else:
        if not os.path.exists(input_path):
            raise InputNotFoundError(input_path)
        pages = PageLoader.load(input_path)

    output.info(f"Loaded {len(pages)} page(s) from {input_path}")

    roots = HierarchyBuilder().build_tree(pages)
    page_count = HierarchyBuilder.count_pages(roots)
    if page_count < len(pages):
        output.warning(f"Skipped {len(pages) - page_count} page(s) with duplicate ids")
    writer = VaultWriter(vault_dir, config=config)

    with output.spinner(f"Exporting {page_count} page(s)..."):
        result = writer.write(roots)

    output.print_export_summary(result, vault_dir)


@app.command()
def main_command(
    input_path: Optional[str] = typer.Argument(
        None,
        help="ADF JSON document (or page dump with --vault); '-' reads stdin",
        metavar="INPUT",
    ),
    output_path: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write Markdown to this file instead of stdout",
        metavar="FILE",
    ),
    vault_dir: Optional[str] = typer.Option(
        None,
        "--vault",
        help="Treat INPUT as a page dump and export it into this vault directory",
        metavar="DIR",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help=f"YAML configuration file (default: {ConfigLoader.DEFAULT_CONFIG_FILE} if present)",
        metavar="FILE",
    ),
    no_comments: bool = typer.Option(
        False,
        "--no-comments",
        help="Omit HTML comments for unsupported or lossy constructs",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Convert Atlassian Document Format (ADF) to Obsidian Markdown.

    \b
    QUICK START:
      adf2obsidian page.json                     # Print Markdown to stdout
      adf2obsidian page.json -o page.md          # Write Markdown to a file
      cat page.json | adf2obsidian -             # Read ADF from stdin
      adf2obsidian pages.json --vault ./vault    # Export a page dump into a vault
    """
    if version:
        typer.echo(f"adf2obsidian version {__version__}")
        raise typer.Exit()

    if input_path is None:
        typer.echo("Error: Missing argument 'INPUT' (a file path, or '-' for stdin)", err=True)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    _configure_logging(verbosity)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    if vault_dir is not None and output_path is not None:
        output.error("--output cannot be combined with --vault")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    try:
        config = _load_config(config_path, no_comments, output)

        if vault_dir is not None:
            _run_export(input_path, vault_dir, config, output)
        else:
            _run_convert(input_path, output_path, config, output)

    except Adf2ObsidianError as e:
        logger.error(f"{type(e).__name__}: {e}")
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    except Exception as e:
        logger.exception("Unexpected error")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    raise typer.Exit(ExitCode.SUCCESS)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m adf2obsidian.cli.main
if __name__ == "__main__":
    main()
