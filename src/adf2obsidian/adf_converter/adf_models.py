"""Data models for ADF (Atlassian Document Format) conversion.

This module defines the node and mark shapes of an ADF tree, the immutable
context record threaded through recursive conversion, and the conversion
options holding the caller-supplied resolvers.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


class AdfNodeType(Enum):
    """Types of ADF nodes known to the converter."""

    # Document root
    DOC = "doc"

    # Block nodes
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BLOCKQUOTE = "blockquote"
    CODE_BLOCK = "codeBlock"
    RULE = "rule"
    PANEL = "panel"
    EXPAND = "expand"
    NESTED_EXPAND = "nestedExpand"
    LAYOUT_SECTION = "layoutSection"
    LAYOUT_COLUMN = "layoutColumn"

    # Lists
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    TASK_LIST = "taskList"
    TASK_ITEM = "taskItem"
    DECISION_LIST = "decisionList"
    DECISION_ITEM = "decisionItem"

    # Tables
    TABLE = "table"
    TABLE_ROW = "tableRow"
    TABLE_HEADER = "tableHeader"
    TABLE_CELL = "tableCell"

    # Media
    MEDIA_SINGLE = "mediaSingle"
    MEDIA_GROUP = "mediaGroup"
    MEDIA = "media"

    # Inline nodes
    TEXT = "text"
    HARD_BREAK = "hardBreak"
    MENTION = "mention"
    EMOJI = "emoji"
    DATE = "date"
    STATUS = "status"
    INLINE_CARD = "inlineCard"

    # Extensions (macros)
    EXTENSION = "extension"
    INLINE_EXTENSION = "inlineExtension"
    BODIED_EXTENSION = "bodiedExtension"

    # Other
    UNKNOWN = "unknown"


KNOWN_NODE_TYPES = frozenset(node_type.value for node_type in AdfNodeType)


class AdfMarkType(Enum):
    """Types of ADF text marks known to the mark composer."""

    STRONG = "strong"
    EM = "em"
    CODE = "code"
    STRIKE = "strike"
    UNDERLINE = "underline"
    LINK = "link"
    SUBSUP = "subsup"
    TEXT_COLOR = "textColor"


# List containers whose items are rendered as nested blocks inside a list item
NESTED_LIST_NODE_TYPES = {
    AdfNodeType.BULLET_LIST,
    AdfNodeType.ORDERED_LIST,
}


@dataclass
class AdfMark:
    """Represents a text mark (formatting) in ADF.

    Attributes:
        type: Mark type (strong, em, link, code, subsup, textColor, etc.)
        attrs: Mark-specific attributes (href, sub/sup selector, color)
    """

    type: str
    attrs: Dict[str, Any] = field(default_factory=dict)


@dataclass
class AdfNode:
    """Represents a node in the ADF tree.

    Attributes:
        type: Node type discriminator (paragraph, heading, text, etc.)
        content: Ordered child nodes (empty for leaf nodes)
        text: Text content (text nodes only)
        attrs: Type-specific attributes (level, panelType, id, ...)
        marks: Inline formatting marks (text nodes only)
    """

    type: str
    content: List["AdfNode"] = field(default_factory=list)
    text: Optional[str] = None
    attrs: Dict[str, Any] = field(default_factory=dict)
    marks: List[AdfMark] = field(default_factory=list)

    @property
    def node_type(self) -> AdfNodeType:
        """Get the AdfNodeType enum value."""
        try:
            return AdfNodeType(self.type)
        except ValueError:
            return AdfNodeType.UNKNOWN

    def get_attr(self, name: str, default: Any = None) -> Any:
        """Get an attribute, treating an explicit null the same as a missing key."""
        value = self.attrs.get(name)
        return default if value is None else value


@dataclass
class AdfDocument:
    """Represents a complete ADF document.

    Attributes:
        version: ADF schema version (usually 1)
        content: List of top-level block nodes
    """

    version: int = 1
    content: List[AdfNode] = field(default_factory=list)


@dataclass(frozen=True)
class ConversionContext:
    """Structural position threaded through recursive conversion.

    Instances are never mutated; every recursion point that changes nesting
    derives a new value, so sibling subtrees cannot observe each other.

    Attributes:
        in_list_item: Currently nested inside a list, task or decision item
        in_table_cell: Currently nested inside a table cell
        list_depth: Current list nesting depth (indentation level)
        depth: Node nesting depth, used for the recursion cap
    """

    in_list_item: bool = False
    in_table_cell: bool = False
    list_depth: int = 0
    depth: int = 0

    def for_list_item(self) -> "ConversionContext":
        """Context for the children of a bullet or ordered list item."""
        return replace(self, in_list_item=True, list_depth=self.list_depth + 1)

    def for_task_item(self) -> "ConversionContext":
        """Context for the children of a task or decision item."""
        return replace(self, in_list_item=True)

    def for_table_cell(self) -> "ConversionContext":
        """Fresh structural context for the content of a table cell."""
        return ConversionContext(in_table_cell=True, depth=self.depth)

    def for_block(self) -> "ConversionContext":
        """Fresh structural context for the body of a block container."""
        return ConversionContext(depth=self.depth)

    def descend(self) -> "ConversionContext":
        return replace(self, depth=self.depth + 1)


def default_media_url_resolver(node: AdfNode) -> str:
    """Use the explicit URL attribute, else a placeholder keyed by media id."""
    url = node.get_attr("url")
    if url:
        return str(url)
    return f"attachment://{node.get_attr('id', 'unknown')}"


def default_mention_resolver(node: AdfNode) -> str:
    """Use the mention's display text, else its id, else 'unknown'."""
    return str(node.get_attr("text", node.get_attr("id", "unknown")))


DEFAULT_MAX_DEPTH = 100

# Each nesting level costs several interpreter frames during conversion
MAX_SAFE_DEPTH = 100


@dataclass(frozen=True)
class ConversionOptions:
    """Options for one conversion session. Immutable after construction.

    Attributes:
        include_unsupported_comments: Emit HTML comments for lossy or unknown constructs
        media_url_resolver: Maps a media node to the URL used in the Markdown output
        mention_resolver: Maps a mention node to the display name after '@'
        max_depth: Maximum node nesting depth rendered before truncating
    """

    include_unsupported_comments: bool = True
    media_url_resolver: Callable[[AdfNode], str] = default_media_url_resolver
    mention_resolver: Callable[[AdfNode], str] = default_mention_resolver
    max_depth: int = DEFAULT_MAX_DEPTH


def build_options(
    include_unsupported_comments: bool = True,
    media_url_template: Optional[str] = None,
    mentions: Optional[Dict[str, str]] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ConversionOptions:
    """Build ConversionOptions from declarative settings.

    Args:
        include_unsupported_comments: Emit HTML comments for lossy constructs
        media_url_template: Template with {id} and {collection} placeholders,
            used for media nodes that carry no explicit URL
        mentions: Mapping of mention id to display name
        max_depth: Maximum node nesting depth

    Returns:
        ConversionOptions with resolvers derived from the settings
    """
    media_resolver = default_media_url_resolver
    mention_resolver = default_mention_resolver

    if media_url_template:
        def media_resolver(node: AdfNode) -> str:
            url = node.get_attr("url")
            if url:
                return str(url)
            return media_url_template.format(
                id=node.get_attr("id", "unknown"),
                collection=node.get_attr("collection", ""),
            )

    if mentions:
        lookup = dict(mentions)

        def mention_resolver(node: AdfNode) -> str:
            mention_id = node.get_attr("id")
            if mention_id is not None and str(mention_id) in lookup:
                return lookup[str(mention_id)]
            return default_mention_resolver(node)

    return ConversionOptions(
        include_unsupported_comments=include_unsupported_comments,
        media_url_resolver=media_resolver,
        mention_resolver=mention_resolver,
        max_depth=max_depth,
    )
