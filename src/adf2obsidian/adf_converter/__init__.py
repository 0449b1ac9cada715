"""ADF to Obsidian Markdown conversion engine.

This package converts Atlassian Document Format trees into Obsidian-flavoured
Markdown, flagging constructs Markdown cannot represent with HTML comments.

Key classes:
    AdfToMarkdownConverter: Top-level driver (envelope check, trimming)
    ConverterRegistry: Node type dispatch and recursion hub
    MarkComposer: Ordered inline mark composition
    AdfParser: Fail-soft ADF JSON parsing
    ConversionOptions: Comment flag, media/mention resolvers, depth cap
    ConversionContext: Immutable structural position during conversion
"""

from .adf_models import (
    KNOWN_NODE_TYPES,
    MAX_SAFE_DEPTH,
    AdfDocument,
    AdfMark,
    AdfMarkType,
    AdfNode,
    AdfNodeType,
    ConversionContext,
    ConversionOptions,
    build_options,
    default_media_url_resolver,
    default_mention_resolver,
)
from .adf_parser import AdfParser
from .converters import NodeConverter, default_converters
from .errors import Adf2ObsidianError, ConverterRegistrationError, DocumentParseError
from .mark_composer import MarkComposer
from .markdown_converter import AdfToMarkdownConverter, convert_adf_to_markdown
from .registry import ConverterRegistry

__all__ = [
    # Main interface
    "AdfToMarkdownConverter",
    "convert_adf_to_markdown",
    # Core classes
    "ConverterRegistry",
    "MarkComposer",
    "AdfParser",
    "NodeConverter",
    "default_converters",
    # Data models
    "AdfDocument",
    "AdfNode",
    "AdfMark",
    "AdfNodeType",
    "AdfMarkType",
    "KNOWN_NODE_TYPES",
    "MAX_SAFE_DEPTH",
    "ConversionContext",
    "ConversionOptions",
    "build_options",
    "default_media_url_resolver",
    "default_mention_resolver",
    # Errors
    "Adf2ObsidianError",
    "ConverterRegistrationError",
    "DocumentParseError",
]
