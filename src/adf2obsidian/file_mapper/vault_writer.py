"""Writes converted page trees into an Obsidian vault.

Layout:
    - A page with children becomes a folder named after the page, holding
      the page itself as the index note and its children.
    - A leaf page becomes "<Title>.md" in its parent's folder.

Existing notes are overwritten.
"""

import logging
import os
from typing import List, Optional, Set

from adf2obsidian.adf_converter.markdown_converter import AdfToMarkdownConverter

from .errors import FilesystemError
from .filesafe_converter import FilesafeConverter
from .frontmatter_handler import FrontmatterHandler
from .models import ExportConfig, ExportResult, PageNode

logger = logging.getLogger(__name__)

# Maximum page hierarchy depth to prevent stack overflow
MAX_RECURSION_DEPTH = 50


class VaultWriter:
    """Exports a page forest into a directory of Markdown notes.

    Example:
        >>> writer = VaultWriter("/path/to/vault")
        >>> result = writer.write(HierarchyBuilder().build_tree(pages))
        >>> print(f"Wrote {result.page_count} notes")
    """

    def __init__(
        self,
        root_dir: str,
        converter: Optional[AdfToMarkdownConverter] = None,
        config: Optional[ExportConfig] = None
    ):
        """Initialize the vault writer.

        Args:
            root_dir: Vault directory (created if missing)
            converter: ADF converter (defaults to one built from config)
            config: Export configuration (defaults to ExportConfig())
        """
        self.root_dir = root_dir
        self.config = config or ExportConfig()
        self.converter = converter or AdfToMarkdownConverter(self.config.to_options())

    def write(self, roots: List[PageNode]) -> ExportResult:
        """Convert and write every page in the forest.

        Args:
            roots: Root PageNodes from HierarchyBuilder

        Returns:
            ExportResult with the written paths

        Raises:
            FilesystemError: If a directory or note cannot be written, or the
                hierarchy is too deep
        """
        result = ExportResult()
        self._ensure_directory(self.root_dir)
        self._write_level(roots, self.root_dir, result, depth=0)

        logger.info(
            f"Exported {result.page_count} page(s) to {self.root_dir} "
            f"({len(result.overwritten_files)} overwritten)"
        )
        return result

    def _convert_body(self, node: PageNode) -> str:
        if node.page.adf is None:
            return ""
        return self.converter.convert(node.page.adf)

    def _compose(self, node: PageNode, markdown: str) -> str:
        if self.config.frontmatter:
            return FrontmatterHandler.generate(node.page, markdown)
        return f"{markdown}\n" if markdown else ""

    def _write_level(
        self,
        nodes: List[PageNode],
        dir_path: str,
        result: ExportResult,
        depth: int,
        reserved: Optional[Set[str]] = None
    ) -> None:
        """Write one level of siblings into dir_path, recursing into folders.

        Raises:
            FilesystemError: If recursion depth exceeds MAX_RECURSION_DEPTH
        """
        if depth > MAX_RECURSION_DEPTH:
            raise FilesystemError(
                dir_path,
                'hierarchy',
                f'Page hierarchy exceeds maximum depth of {MAX_RECURSION_DEPTH}. '
                f'This may indicate excessively deep nesting.'
            )

        taken: Set[str] = set(reserved or ())
        for node in nodes:
            name = FilesafeConverter.unique_name(
                FilesafeConverter.sanitize_title(node.page.title),
                taken
            )

            if node.children:
                folder_path = os.path.join(dir_path, name)
                self._ensure_directory(folder_path)
                self._write_note(
                    node,
                    os.path.join(folder_path, self.config.index_filename),
                    result
                )

                # Children must not collide with the index note
                index_stem = os.path.splitext(self.config.index_filename)[0]
                self._write_level(
                    node.children,
                    folder_path,
                    result,
                    depth + 1,
                    reserved={index_stem.lower()}
                )
            else:
                self._write_note(node, os.path.join(dir_path, f"{name}.md"), result)

    def _write_note(self, node: PageNode, file_path: str, result: ExportResult) -> None:
        self._validate_path_safety(file_path, self.root_dir)
        markdown = self._convert_body(node)
        if not markdown:
            result.empty_pages.append(node.page.page_id)
        content = self._compose(node, markdown)

        existed = os.path.exists(file_path)
        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            raise FilesystemError(file_path, 'write', str(e))

        if existed:
            logger.info(f"Overwrote {file_path}")
            result.overwritten_files.append(file_path)
        else:
            logger.info(f"Wrote {file_path}")
        result.written_files.append(file_path)

    def _ensure_directory(self, dir_path: str) -> None:
        if os.path.isdir(dir_path):
            return
        try:
            os.makedirs(dir_path, exist_ok=True)
        except OSError as e:
            raise FilesystemError(dir_path, 'create_directory', str(e))
        logger.debug(f"Created directory {dir_path}")

    def _validate_path_safety(self, file_path: str, base_directory: str) -> None:
        """Validate that a file path is within the base directory.

        Resolves symlinks so a folder linked outside the vault is rejected.

        Raises:
            FilesystemError: If path is outside base directory
        """
        real_base = os.path.realpath(base_directory)
        real_path = os.path.realpath(file_path)

        if not real_path.startswith(real_base + os.sep) and real_path != real_base:
            raise FilesystemError(
                file_path,
                'validate',
                f'Path traversal detected: {file_path} is outside base directory {base_directory}'
            )
