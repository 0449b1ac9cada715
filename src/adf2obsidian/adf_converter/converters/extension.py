"""Converters for constructs Markdown cannot represent.

Extensions (Confluence macros) and node types with no registered converter
are rendered as HTML comments when unsupported-comment mode is on, so the
loss stays visible to the reader of the note.
"""

from ..adf_models import AdfNode, ConversionContext
from .base import NodeConverter


class ExtensionConverter(NodeConverter):
    """Opaque macros: the body (if any) is still rendered after a placeholder."""

    node_types = ("extension", "inlineExtension", "bodiedExtension")

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        extension_type = node.get_attr("extensionType", "unknown")
        extension_key = node.get_attr("extensionKey", "unknown")
        body = registry.convert_nodes(node.content, context.for_block())

        if registry.get_options().include_unsupported_comments:
            comment = f"<!-- Unsupported extension: {extension_type}/{extension_key} -->"
            if body:
                return f"{comment}\n{body}\n\n"
            return f"{comment}\n\n"

        return body + "\n\n" if body else ""


class UnsupportedConverter(NodeConverter):
    """Fallback for node types with no registered converter. Never raises."""

    # Catch-all; owns no types in the registry mapping
    node_types = ()

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        if registry.get_options().include_unsupported_comments:
            return f"<!-- Unsupported ADF node: {node.type} -->\n\n"
        return ""
