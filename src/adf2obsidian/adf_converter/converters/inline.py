"""Inline node converters: text, hard break, mention, emoji, date, status, inline card."""

import logging
from datetime import datetime, timedelta, timezone

from ..adf_models import AdfNode, ConversionContext
from .base import NodeConverter

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class TextConverter(NodeConverter):
    """Text with its marks applied; the only caller of the mark composer."""

    node_types = ("text",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        text = node.text or ""
        if node.marks:
            text = registry.apply_marks(text, node.marks)
        return text


class HardBreakConverter(NodeConverter):
    node_types = ("hardBreak",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        # Two trailing spaces force a Markdown line break
        return "  \n"


class MentionConverter(NodeConverter):
    node_types = ("mention",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        return "@" + registry.get_options().mention_resolver(node)


class EmojiConverter(NodeConverter):
    node_types = ("emoji",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        short_name = str(node.get_attr("shortName", ""))
        return f":{short_name.strip(':')}:"


class DateConverter(NodeConverter):
    """Millisecond timestamp to a UTC calendar date (YYYY-MM-DD).

    An unparseable timestamp is passed through unchanged.
    """

    node_types = ("date",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        timestamp = node.attrs.get("timestamp")
        if timestamp is None or timestamp == "":
            return ""

        try:
            moment = EPOCH + timedelta(milliseconds=float(timestamp))
        except (TypeError, ValueError, OverflowError):
            logger.debug(f"Unparseable date timestamp: {timestamp!r}")
            return str(timestamp)

        return moment.date().isoformat()


class StatusConverter(NodeConverter):
    node_types = ("status",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        text = str(node.get_attr("text", ""))
        return f"**[{text.upper()}]**"


class InlineCardConverter(NodeConverter):
    node_types = ("inlineCard",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        url = node.get_attr("url", "")
        if url:
            return f"[{url}]({url})"
        return ""
