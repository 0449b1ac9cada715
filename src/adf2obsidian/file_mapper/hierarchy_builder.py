"""Hierarchy builder for page dumps.

This module turns the flat list of pages in a dump into a tree using each
page's parent link. Pages whose parent is not in the dump become roots.
"""

import logging
from typing import Dict, List, Set

from .models import PageNode, PageRecord

logger = logging.getLogger(__name__)


class HierarchyBuilder:
    """Builds page hierarchy trees from parent links.

    Siblings keep the order in which they appear in the dump. A page that
    is part of a parent cycle (A → B → A) cannot be placed under a root, so
    the first page of the cycle in dump order is promoted to a root and a
    warning is logged.

    Example:
        >>> pages = [PageRecord("1", "Home"), PageRecord("2", "Child", parent_id="1")]
        >>> roots = HierarchyBuilder().build_tree(pages)
        >>> [child.page.title for child in roots[0].children]
        ['Child']
    """

    def build_tree(self, pages: List[PageRecord]) -> List[PageNode]:
        """Build the page forest for a dump.

        Args:
            pages: Pages in dump order

        Returns:
            Root PageNodes, in dump order
        """
        nodes: Dict[str, PageNode] = {}
        for page in pages:
            if page.page_id in nodes:
                logger.warning(
                    f"Duplicate page id {page.page_id} ('{page.title}') - "
                    f"keeping the first occurrence"
                )
                continue
            nodes[page.page_id] = PageNode(page=page)

        roots: List[PageNode] = []
        for node in nodes.values():
            parent_id = node.page.parent_id
            if parent_id is None or parent_id not in nodes or parent_id == node.page.page_id:
                if parent_id is not None and parent_id != node.page.page_id:
                    logger.debug(
                        f"Parent {parent_id} of page {node.page.page_id} not in dump - "
                        f"treating page as a root"
                    )
                roots.append(node)
            else:
                nodes[parent_id].children.append(node)

        reachable = self._collect_reachable(roots)

        # Whatever is left hangs off a cycle
        for node in nodes.values():
            if node.page.page_id in reachable:
                continue
            logger.warning(
                f"Page {node.page.page_id} ('{node.page.title}') is part of a parent "
                f"cycle - promoting it to a root"
            )
            parent = nodes[node.page.parent_id]
            parent.children = [c for c in parent.children if c is not node]
            roots.append(node)
            reachable |= self._collect_reachable([node])

        return roots

    def _collect_reachable(self, roots: List[PageNode]) -> Set[str]:
        """Return the ids of every page in the given subtrees."""
        seen: Set[str] = set()
        stack = list(roots)
        while stack:
            node = stack.pop()
            if node.page.page_id in seen:
                continue
            seen.add(node.page.page_id)
            stack.extend(node.children)
        return seen

    @staticmethod
    def count_pages(roots: List[PageNode]) -> int:
        """Count the pages in a forest."""
        total = 0
        stack = list(roots)
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children)
        return total
