"""Convert Atlassian Document Format pages into Obsidian Markdown notes."""

from .adf_converter import (
    AdfToMarkdownConverter,
    ConversionOptions,
    build_options,
    convert_adf_to_markdown,
)

__version__ = "0.1.0"

__all__ = [
    "AdfToMarkdownConverter",
    "ConversionOptions",
    "build_options",
    "convert_adf_to_markdown",
    "__version__",
]
