"""Data models for file mapper.

This module defines the data models used to export a Confluence page dump
into an Obsidian vault. All models use dataclasses.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from adf2obsidian.adf_converter.adf_models import ConversionOptions, build_options


@dataclass
class PageRecord:
    """A single page from a page dump.

    Attributes:
        page_id: Confluence page ID
        title: Page title
        parent_id: Parent page ID (None for top-level pages)
        adf: The page body as parsed ADF JSON (None if the page has no body)
    """
    page_id: str
    title: str
    parent_id: Optional[str] = None
    adf: Optional[Dict[str, Any]] = None


@dataclass
class PageNode:
    """Represents a page and its children in the page hierarchy.

    Attributes:
        page: The page record
        children: Child nodes, in dump order
    """
    page: PageRecord
    children: List['PageNode'] = field(default_factory=list)


@dataclass
class ExportConfig:
    """Configuration for converting pages and writing them into a vault.

    Attributes:
        include_unsupported_comments: Emit HTML comments for lossy constructs
        media_url_template: URL template for attachments ({id}, {collection})
        mentions: Mapping of mention (account) id to display name
        max_depth: Maximum ADF nesting depth rendered
        index_filename: File name of the note for a page that has children
        frontmatter: Prepend YAML frontmatter with the page id and title
    """
    include_unsupported_comments: bool = True
    media_url_template: Optional[str] = None
    mentions: Dict[str, str] = field(default_factory=dict)
    max_depth: int = 100
    index_filename: str = "index.md"
    frontmatter: bool = False

    def to_options(self) -> ConversionOptions:
        """Build the conversion options described by this configuration."""
        return build_options(
            include_unsupported_comments=self.include_unsupported_comments,
            media_url_template=self.media_url_template,
            mentions=self.mentions,
            max_depth=self.max_depth,
        )


@dataclass
class ExportResult:
    """Result of exporting a page tree into a vault.

    Attributes:
        written_files: Paths of the notes written, in write order
        overwritten_files: Paths that already existed and were replaced
        empty_pages: IDs of pages written as empty notes (missing, invalid
            or blank body)
    """
    written_files: List[str] = field(default_factory=list)
    overwritten_files: List[str] = field(default_factory=list)
    empty_pages: List[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.written_files)
