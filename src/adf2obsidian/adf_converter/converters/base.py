"""Base interface for ADF node converters."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Tuple

from ..adf_models import AdfNode, ConversionContext

if TYPE_CHECKING:
    from ..registry import ConverterRegistry


class NodeConverter(ABC):
    """Converts one ADF node type (or a group of related types) to Markdown.

    Converters are stateless. They render their own syntax and hand children
    back to the registry for recursive conversion instead of recursing
    directly.

    Attributes:
        node_types: ADF node type strings owned by this converter
    """

    node_types: Tuple[str, ...] = ()

    @abstractmethod
    def convert(
        self,
        node: AdfNode,
        context: ConversionContext,
        registry: "ConverterRegistry",
    ) -> str:
        """Convert the node to Markdown.

        Args:
            node: The ADF node to convert
            context: Structural position of the node
            registry: Registry used to convert child nodes

        Returns:
            The Markdown representation of the node
        """


def quote_lines(content: str) -> str:
    """Prefix every line of stripped content with '> '."""
    return "\n".join(f"> {line}" for line in content.strip().split("\n"))
