"""YAML frontmatter generation for exported notes.

Frontmatter links an exported note back to its Confluence page:

    ---
    confluence_page_id: '123456'
    title: Customer Feedback
    ---
"""

import yaml

from .models import PageRecord


class FrontmatterHandler:
    """Generates markdown content with YAML frontmatter."""

    @classmethod
    def build_frontmatter(cls, page: PageRecord) -> dict:
        """Return the frontmatter fields for a page."""
        return {
            'confluence_page_id': page.page_id,
            'title': page.title,
        }

    @classmethod
    def generate(cls, page: PageRecord, markdown: str) -> str:
        """Prepend YAML frontmatter to converted markdown.

        Args:
            page: The page the markdown was converted from
            markdown: Converted note body (may be empty)

        Returns:
            Full note content with frontmatter
        """
        yaml_str = yaml.safe_dump(
            cls.build_frontmatter(page),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False
        )

        if not markdown:
            return f"---\n{yaml_str}---\n"
        return f"---\n{yaml_str}---\n\n{markdown}"
