"""Media converters."""

from ..adf_models import AdfNode, AdfNodeType, ConversionContext
from .base import NodeConverter

# Media kinds rendered as an embed rather than a plain link
EMBEDDED_MEDIA_KINDS = ("file", "external")


class MediaConverter(NodeConverter):
    """A single media item: an image embed for files, a link otherwise.

    The URL comes from the configured media resolver.
    """

    node_types = ("media",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        url = registry.get_options().media_url_resolver(node)
        alt = node.get_attr("alt", "image")
        if node.attrs.get("type") in EMBEDDED_MEDIA_KINDS:
            return f"![{alt}]({url})"
        return f"[{alt}]({url})"


class MediaSingleConverter(NodeConverter):
    """Media wrappers render each contained media item on its own line."""

    node_types = ("mediaSingle", "mediaGroup")

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        media_converter = MediaConverter()
        items = [
            media_converter.convert(child, context, registry)
            for child in node.content
            if child.node_type == AdfNodeType.MEDIA
        ]
        return "\n".join(items) + "\n\n"
