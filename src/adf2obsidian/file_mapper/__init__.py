"""File mapper library for exporting Confluence page dumps.

This package maps a local dump of Confluence pages onto an Obsidian vault:
one Markdown note per page, nested in folders that mirror the page
hierarchy, with optional YAML frontmatter.
"""

from .models import PageRecord, PageNode, ExportConfig, ExportResult
from .errors import (
    FileMapperError,
    FilesystemError,
    ConfigError,
    PageDumpError,
)
from .config_loader import ConfigLoader
from .filesafe_converter import FilesafeConverter
from .frontmatter_handler import FrontmatterHandler
from .hierarchy_builder import HierarchyBuilder
from .page_loader import PageLoader
from .vault_writer import VaultWriter

__all__ = [
    'PageRecord',
    'PageNode',
    'ExportConfig',
    'ExportResult',
    'FileMapperError',
    'FilesystemError',
    'ConfigError',
    'PageDumpError',
    'ConfigLoader',
    'FilesafeConverter',
    'FrontmatterHandler',
    'HierarchyBuilder',
    'PageLoader',
    'VaultWriter',
]
