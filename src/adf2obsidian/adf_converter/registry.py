"""Converter registry: the single recursion hub of the conversion engine.

Every converter asks the registry to convert its children rather than
recursing directly. The node type to converter mapping is fixed at
construction and validated so that no node type is claimed twice.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from .adf_models import MAX_SAFE_DEPTH, AdfMark, AdfNode, ConversionContext, ConversionOptions
from .converters import NodeConverter, UnsupportedConverter, default_converters
from .errors import ConverterRegistrationError
from .mark_composer import MarkComposer

logger = logging.getLogger(__name__)


class ConverterRegistry:
    """Maps ADF node types to converters and drives recursive conversion.

    Attributes:
        converters: Read-only mapping of node type to converter

    Example:
        >>> registry = ConverterRegistry(ConversionOptions())
        >>> registry.convert_nodes([AdfNode(type="text", text="hi")])
        'hi'
    """

    def __init__(
        self,
        options: Optional[ConversionOptions] = None,
        converters: Optional[Iterable[NodeConverter]] = None,
        mark_composer: Optional[MarkComposer] = None,
    ):
        """Build the registry.

        Args:
            options: Conversion options (defaults to ConversionOptions())
            converters: Converters to register (defaults to default_converters())
            mark_composer: Mark composer used by text nodes

        Raises:
            ConverterRegistrationError: If two converters claim the same node type
        """
        self._options = options or ConversionOptions()
        self._mark_composer = mark_composer or MarkComposer()
        self._fallback = UnsupportedConverter()

        self._max_depth = self._options.max_depth
        if self._max_depth > MAX_SAFE_DEPTH:
            logger.warning(
                f"max_depth {self._max_depth} exceeds the safe limit; using {MAX_SAFE_DEPTH}"
            )
            self._max_depth = MAX_SAFE_DEPTH

        mapping: Dict[str, NodeConverter] = {}
        for converter in (default_converters() if converters is None else converters):
            for node_type in converter.node_types:
                existing = mapping.get(node_type)
                if existing is not None:
                    raise ConverterRegistrationError(
                        node_type,
                        type(existing).__name__,
                        type(converter).__name__,
                    )
                mapping[node_type] = converter

        self.converters: Mapping[str, NodeConverter] = MappingProxyType(mapping)
        logger.debug(f"Registered converters for {len(mapping)} node types")

    def get_options(self) -> ConversionOptions:
        return self._options

    def apply_marks(self, text: str, marks: List[AdfMark]) -> str:
        return self._mark_composer.apply(text, marks)

    def convert_node(self, node: AdfNode, context: Optional[ConversionContext] = None) -> str:
        """Convert a single node with the converter registered for its type.

        Unknown node types go to the unsupported fallback. Nodes nested deeper
        than options.max_depth (capped at MAX_SAFE_DEPTH) are replaced by a
        placeholder.

        Args:
            node: The ADF node to convert
            context: Structural position (defaults to the document root)

        Returns:
            Markdown for the node
        """
        context = context or ConversionContext()

        if context.depth >= self._max_depth:
            logger.warning(
                f"Maximum nesting depth {self._max_depth} exceeded at '{node.type}'; "
                f"content truncated"
            )
            if self._options.include_unsupported_comments:
                return f"<!-- Maximum nesting depth exceeded: {node.type} -->\n\n"
            return ""

        converter = self.converters.get(node.type)
        if converter is None:
            logger.debug(f"No converter for node type '{node.type}'")
            converter = self._fallback

        return converter.convert(node, context.descend(), self)

    def convert_nodes(self, nodes: Iterable[AdfNode], context: Optional[ConversionContext] = None) -> str:
        """Convert a sequence of nodes and concatenate the results in order."""
        context = context or ConversionContext()
        return "".join(self.convert_node(node, context) for node in nodes)
