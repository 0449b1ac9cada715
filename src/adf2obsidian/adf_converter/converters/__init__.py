"""Node converters for ADF to Obsidian Markdown conversion.

Each converter owns one ADF node type or a group of related types and
declares them in its node_types attribute. default_converters() returns the
full built-in set; the registry validates that no type is claimed twice.
"""

from typing import List

from .base import NodeConverter
from .blocks import (
    BlockquoteConverter,
    CodeBlockConverter,
    ExpandConverter,
    HeadingConverter,
    LayoutSectionConverter,
    PanelConverter,
    ParagraphConverter,
    RuleConverter,
)
from .extension import ExtensionConverter, UnsupportedConverter
from .inline import (
    DateConverter,
    EmojiConverter,
    HardBreakConverter,
    InlineCardConverter,
    MentionConverter,
    StatusConverter,
    TextConverter,
)
from .lists import (
    BulletListConverter,
    DecisionItemConverter,
    DecisionListConverter,
    ListItemConverter,
    OrderedListConverter,
    TaskItemConverter,
    TaskListConverter,
)
from .media import MediaConverter, MediaSingleConverter
from .table import TableConverter


def default_converters() -> List[NodeConverter]:
    """Create the built-in converter set (one fresh instance per converter)."""
    return [
        # Block nodes
        ParagraphConverter(),
        HeadingConverter(),
        BlockquoteConverter(),
        CodeBlockConverter(),
        RuleConverter(),
        PanelConverter(),
        ExpandConverter(),
        LayoutSectionConverter(),
        TableConverter(),
        MediaSingleConverter(),
        MediaConverter(),
        # Lists
        BulletListConverter(),
        OrderedListConverter(),
        ListItemConverter(),
        TaskListConverter(),
        TaskItemConverter(),
        DecisionListConverter(),
        DecisionItemConverter(),
        # Inline nodes
        TextConverter(),
        HardBreakConverter(),
        MentionConverter(),
        EmojiConverter(),
        DateConverter(),
        StatusConverter(),
        InlineCardConverter(),
        # Macros
        ExtensionConverter(),
    ]


__all__ = [
    "NodeConverter",
    "default_converters",
    "ParagraphConverter",
    "HeadingConverter",
    "BlockquoteConverter",
    "CodeBlockConverter",
    "RuleConverter",
    "PanelConverter",
    "ExpandConverter",
    "LayoutSectionConverter",
    "TableConverter",
    "MediaSingleConverter",
    "MediaConverter",
    "BulletListConverter",
    "OrderedListConverter",
    "ListItemConverter",
    "TaskListConverter",
    "TaskItemConverter",
    "DecisionListConverter",
    "DecisionItemConverter",
    "TextConverter",
    "HardBreakConverter",
    "MentionConverter",
    "EmojiConverter",
    "DateConverter",
    "StatusConverter",
    "InlineCardConverter",
    "ExtensionConverter",
    "UnsupportedConverter",
]
