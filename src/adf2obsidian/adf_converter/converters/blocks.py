"""Block node converters: paragraph, heading, quote, code, rule, callouts, layout."""

from ..adf_models import AdfNode, ConversionContext
from .base import NodeConverter, quote_lines

PANEL_CALLOUTS = {
    "info": "info",
    "note": "note",
    "warning": "warning",
    "success": "success",
    "error": "danger",
}


class ParagraphConverter(NodeConverter):
    """Paragraphs end with a blank line, except inside list items and table cells."""

    node_types = ("paragraph",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        content = registry.convert_nodes(node.content, context)
        if context.in_list_item or context.in_table_cell:
            return content
        return content + "\n\n"


class HeadingConverter(NodeConverter):
    node_types = ("heading",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        level = self._level(node)
        content = registry.convert_nodes(node.content, context.for_block())
        return f"{'#' * level} {content}\n\n"

    @staticmethod
    def _level(node: AdfNode) -> int:
        level = node.get_attr("level", 1)
        if isinstance(level, bool) or not isinstance(level, int):
            try:
                level = int(level)
            except (TypeError, ValueError):
                return 1
        return min(max(level, 1), 6)


class BlockquoteConverter(NodeConverter):
    node_types = ("blockquote",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        content = registry.convert_nodes(node.content, context.for_block())
        return quote_lines(content) + "\n\n"


class CodeBlockConverter(NodeConverter):
    """Code blocks are verbatim: only raw child text is used, marks are ignored."""

    node_types = ("codeBlock",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        language = node.get_attr("language", "")
        code = "".join(child.text or "" for child in node.content)
        return f"```{language}\n{code}\n```\n\n"


class RuleConverter(NodeConverter):
    node_types = ("rule",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        return "---\n\n"


class PanelConverter(NodeConverter):
    """Panels become Obsidian callouts keyed by panel type."""

    node_types = ("panel",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        panel_type = node.get_attr("panelType", "info")
        callout = PANEL_CALLOUTS.get(str(panel_type), "note")
        content = registry.convert_nodes(node.content, context.for_block())
        return f"> [!{callout}]\n{quote_lines(content)}\n\n"


class ExpandConverter(NodeConverter):
    """Expands become collapsed info callouts titled by the expand title."""

    node_types = ("expand", "nestedExpand")

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        title = node.get_attr("title", "Details")
        content = registry.convert_nodes(node.content, context.for_block())
        return f"> [!info]- {title}\n{quote_lines(content)}\n\n"


class LayoutSectionConverter(NodeConverter):
    """Renders layout columns one after another, separated by rules.

    Obsidian has no multi-column layout, so column widths and side-by-side
    placement are lost.
    """

    node_types = ("layoutSection",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        columns = [
            registry.convert_nodes(column.content, context.for_block())
            for column in node.content
        ]
        content = "\n---\n\n".join(columns)

        if registry.get_options().include_unsupported_comments:
            return f"<!-- Layout section (columns not supported) -->\n{content}"
        return content
