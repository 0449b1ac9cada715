"""List family converters: bullet, ordered, task and decision lists.

Items render at an indentation of two spaces per list depth. The first child
of an item carries the item's marker; nested bullet and ordered lists are
emitted as blocks and indent their own items one level deeper. A list adds a
single trailing blank line unless it is itself nested inside a list item.
"""

from typing import List

from ..adf_models import AdfNode, AdfNodeType, ConversionContext, NESTED_LIST_NODE_TYPES
from .base import NodeConverter

INDENT = "  "


def _indent(context: ConversionContext) -> str:
    return INDENT * context.list_depth


def _close_list(result: str, context: ConversionContext) -> str:
    return result if context.in_list_item else result + "\n"


class ListItemConverter(NodeConverter):
    """Renders a list item with a given marker.

    Reached directly through the registry (an orphaned listItem), the item
    uses a bullet marker.
    """

    node_types = ("listItem",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        return self.convert_with_marker(node, "-", context, registry)

    def convert_with_marker(
        self,
        node: AdfNode,
        marker: str,
        context: ConversionContext,
        registry,
    ) -> str:
        """Render an item whose first child is prefixed by marker.

        Args:
            node: The listItem node
            marker: Marker for the first line ('-', '3.', ...)
            context: Context of the enclosing list
            registry: Registry used to convert the item's children

        Returns:
            Markdown lines for the item, each ending in a newline
        """
        indent = _indent(context)
        item_context = context.for_list_item()

        parts: List[str] = []
        first = True

        for child in node.content:
            if child.node_type == AdfNodeType.PARAGRAPH:
                text = registry.convert_nodes(child.content, item_context)
                if first:
                    parts.append(f"{indent}{marker} {text}\n")
                    first = False
                else:
                    parts.append(f"{indent}{INDENT}{text}\n")
            elif child.node_type in NESTED_LIST_NODE_TYPES:
                parts.append(registry.convert_node(child, item_context))
            else:
                converted = registry.convert_node(child, item_context)
                if first:
                    parts.append(f"{indent}{marker} {converted}\n")
                    first = False
                else:
                    parts.append(converted)

        return "".join(parts)


class BulletListConverter(NodeConverter):
    node_types = ("bulletList",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        item_converter = ListItemConverter()
        result = "".join(
            item_converter.convert_with_marker(item, "-", context, registry)
            for item in node.content
        )
        return _close_list(result, context)


class OrderedListConverter(NodeConverter):
    """Numbers items from the list's order attribute, ignoring source gaps."""

    node_types = ("orderedList",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        start = self._start_order(node)
        item_converter = ListItemConverter()
        result = "".join(
            item_converter.convert_with_marker(item, f"{start + index}.", context, registry)
            for index, item in enumerate(node.content)
        )
        return _close_list(result, context)

    @staticmethod
    def _start_order(node: AdfNode) -> int:
        order = node.get_attr("order", 1)
        if isinstance(order, bool):
            return 1
        try:
            return int(order)
        except (TypeError, ValueError):
            return 1


class TaskItemConverter(NodeConverter):
    """Checkbox item; checked only for state exactly 'DONE'."""

    node_types = ("taskItem",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        checked = "x" if node.attrs.get("state") == "DONE" else " "
        content = registry.convert_nodes(node.content, context.for_task_item())
        return f"{_indent(context)}- [{checked}] {content.strip()}\n"


class DecisionItemConverter(NodeConverter):
    """Decision items always render as a bold DECISION marker, whatever their state."""

    node_types = ("decisionItem",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        content = registry.convert_nodes(node.content, context.for_task_item())
        return f"{_indent(context)}- **DECISION:** {content.strip()}\n"


class _ItemListConverter(NodeConverter):
    """Renders item children directly and anything else one level deeper."""

    item_type: AdfNodeType = AdfNodeType.UNKNOWN
    item_converter: NodeConverter

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        parts = []
        for child in node.content:
            if child.node_type == self.item_type:
                parts.append(self.item_converter.convert(child, context, registry))
            else:
                # e.g. a taskList nested directly in a taskList
                parts.append(registry.convert_node(child, context.for_list_item()))
        return _close_list("".join(parts), context)


class TaskListConverter(_ItemListConverter):
    node_types = ("taskList",)
    item_type = AdfNodeType.TASK_ITEM
    item_converter = TaskItemConverter()


class DecisionListConverter(_ItemListConverter):
    node_types = ("decisionList",)
    item_type = AdfNodeType.DECISION_ITEM
    item_converter = DecisionItemConverter()
