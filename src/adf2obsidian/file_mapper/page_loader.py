"""Page dump loading.

A page dump is a JSON file holding Confluence pages in the v2 REST shape,
either as a bare list or wrapped in an object with a "results" list:

    {"results": [
        {"id": "123", "title": "Home", "parentId": null, "status": "current",
         "body": {"atlas_doc_format": {"value": "{\\"type\\": \\"doc\\", ...}"}}}
    ]}

The ADF body may be a JSON string (as returned by the API) or an object.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from .errors import FilesystemError, PageDumpError
from .models import PageRecord

logger = logging.getLogger(__name__)


class PageLoader:
    """Reads page dumps into PageRecord lists."""

    @classmethod
    def load(cls, dump_path: str) -> List[PageRecord]:
        """Load pages from a page dump file.

        Args:
            dump_path: Path to the JSON page dump

        Returns:
            List of PageRecord objects in dump order

        Raises:
            FilesystemError: If the file cannot be read
            PageDumpError: If the file is not valid JSON or has the wrong shape
        """
        try:
            with open(dump_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise FilesystemError(dump_path, 'read', 'Page dump not found')
        except PermissionError:
            raise FilesystemError(dump_path, 'read', 'Permission denied')
        except OSError as e:
            raise FilesystemError(dump_path, 'read', str(e))

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise PageDumpError(dump_path, f"Invalid JSON: {e}")

        return cls.parse(data, source=dump_path)

    @classmethod
    def parse(cls, data: Any, source: str = '<data>') -> List[PageRecord]:
        """Parse already-decoded page dump data.

        Args:
            data: A list of page objects, or an object with a "results" list
            source: Name used in error messages

        Returns:
            List of PageRecord objects in dump order

        Raises:
            PageDumpError: If data has the wrong shape
        """
        if isinstance(data, dict):
            if 'results' not in data:
                raise PageDumpError(source, "Expected a list of pages or an object with 'results'")
            data = data['results']

        if not isinstance(data, list):
            raise PageDumpError(
                source,
                f"Expected a list of pages, got {type(data).__name__}"
            )

        pages: List[PageRecord] = []
        for index, raw_page in enumerate(data):
            if not isinstance(raw_page, dict):
                logger.warning(f"Skipping entry {index} in {source}: not an object")
                continue

            page_id = raw_page.get('id')
            if page_id is None or str(page_id) == '':
                logger.warning(f"Skipping entry {index} in {source}: page has no id")
                continue

            parent_id = raw_page.get('parentId')
            pages.append(PageRecord(
                page_id=str(page_id),
                title=str(raw_page.get('title') or ''),
                parent_id=str(parent_id) if parent_id not in (None, '') else None,
                adf=cls._extract_adf(raw_page, str(page_id)),
            ))

        logger.debug(f"Loaded {len(pages)} page(s) from {source}")
        return pages

    @staticmethod
    def _extract_adf(raw_page: Dict[str, Any], page_id: str) -> Optional[Dict[str, Any]]:
        """Return the page's ADF body as a dict, or None if missing or invalid."""
        body = raw_page.get('body')
        if not isinstance(body, dict):
            return None

        adf_format = body.get('atlas_doc_format')
        if not isinstance(adf_format, dict):
            return None

        value = adf_format.get('value')
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as e:
                logger.warning(f"Page {page_id} has an invalid ADF body: {e}")
                return None

        if not isinstance(value, dict):
            return None
        return value
