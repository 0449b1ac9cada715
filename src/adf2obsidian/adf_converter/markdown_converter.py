"""ADF to Obsidian Markdown converter.

This module provides the top-level entry points of the conversion engine. It
validates the document envelope, runs the converter registry over the root
content and trims the result. Conversion is fail-soft: a malformed envelope
yields an empty string instead of raising.
"""

import logging
from typing import Any, Iterable, Optional, Union

from .adf_models import AdfDocument, ConversionOptions
from .adf_parser import AdfParser
from .converters import NodeConverter
from .registry import ConverterRegistry

logger = logging.getLogger(__name__)

DocumentInput = Union[AdfDocument, Any]


class AdfToMarkdownConverter:
    """Converts ADF documents to Obsidian-flavoured Markdown.

    The converter is synchronous and side-effect free; one instance may be
    reused for many documents as long as the options are not mutated.

    Example:
        >>> converter = AdfToMarkdownConverter()
        >>> converter.convert({
        ...     "type": "doc", "version": 1,
        ...     "content": [{"type": "heading", "attrs": {"level": 2},
        ...                  "content": [{"type": "text", "text": "Hi"}]}],
        ... })
        '## Hi'
    """

    def __init__(
        self,
        options: Optional[ConversionOptions] = None,
        converters: Optional[Iterable[NodeConverter]] = None,
    ):
        """Initialize the converter.

        Args:
            options: Conversion options (comments flag, resolvers, depth cap)
            converters: Custom converter set (defaults to the built-in set)

        Raises:
            ConverterRegistrationError: If two converters claim the same node type
        """
        self.options = options or ConversionOptions()
        self._registry = ConverterRegistry(self.options, converters)
        self._parser = AdfParser()

    def convert(self, document: DocumentInput) -> str:
        """Convert an ADF document to Markdown.

        Args:
            document: Parsed ADF JSON (a dict) or an AdfDocument

        Returns:
            Markdown string with surrounding whitespace trimmed, or an empty
            string when the document envelope is invalid
        """
        if not isinstance(document, AdfDocument):
            document = self._parser.parse_document(document)
            if document is None:
                logger.debug("Invalid ADF envelope; returning empty output")
                return ""

        return self._registry.convert_nodes(document.content).strip()


def convert_adf_to_markdown(
    document: DocumentInput,
    options: Optional[ConversionOptions] = None,
) -> str:
    """Convert an ADF document to Obsidian Markdown.

    Args:
        document: Parsed ADF JSON (a dict) or an AdfDocument
        options: Optional conversion options

    Returns:
        The converted Markdown string
    """
    return AdfToMarkdownConverter(options).convert(document)
