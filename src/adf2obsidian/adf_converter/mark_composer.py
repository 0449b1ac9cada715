"""Inline mark composition for ADF text nodes."""

import logging
from typing import Iterable

from .adf_models import AdfMark, AdfMarkType

logger = logging.getLogger(__name__)


class MarkComposer:
    """Wraps text in the Markdown (or inline HTML) syntax of its marks.

    Marks are applied in list order: marks[0] wraps the text first and ends up
    innermost, the last mark ends up outermost. Unknown marks are a no-op.

    Example:
        >>> composer = MarkComposer()
        >>> composer.apply("x", [AdfMark("strong"), AdfMark("em")])
        '***x***'
    """

    def apply(self, text: str, marks: Iterable[AdfMark]) -> str:
        """Apply marks to text in order.

        Args:
            text: Plain text content
            marks: Ordered marks attached to the text node

        Returns:
            Text wrapped by every mark
        """
        result = text
        for mark in marks:
            result = self.apply_mark(result, mark)
        return result

    def apply_mark(self, text: str, mark: AdfMark) -> str:
        try:
            mark_type = AdfMarkType(mark.type)
        except ValueError:
            logger.debug(f"Ignoring unknown mark type: {mark.type}")
            return text

        if mark_type == AdfMarkType.STRONG:
            return f"**{text}**"
        elif mark_type == AdfMarkType.EM:
            return f"*{text}*"
        elif mark_type == AdfMarkType.CODE:
            return f"`{text}`"
        elif mark_type == AdfMarkType.STRIKE:
            return f"~~{text}~~"
        elif mark_type == AdfMarkType.UNDERLINE:
            # No native Markdown underline
            return f"<u>{text}</u>"
        elif mark_type == AdfMarkType.LINK:
            href = mark.attrs.get("href") or ""
            return f"[{text}]({href})"
        elif mark_type == AdfMarkType.SUBSUP:
            sub_sup = mark.attrs.get("type")
            if sub_sup == "sub":
                return f"<sub>{text}</sub>"
            if sub_sup == "sup":
                return f"<sup>{text}</sup>"
            return text
        elif mark_type == AdfMarkType.TEXT_COLOR:
            color = mark.attrs.get("color") or ""
            return f'<span style="color: {color}">{text}</span>'

        return text
