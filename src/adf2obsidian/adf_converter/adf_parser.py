"""Parser for ADF (Atlassian Document Format) documents.

This module turns ADF JSON (already decoded into dicts and lists) into
AdfDocument and AdfNode objects. Parsing is fail-soft: an invalid envelope
yields None and malformed children are dropped rather than raising.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from .adf_models import AdfDocument, AdfMark, AdfNode
from .errors import DocumentParseError

logger = logging.getLogger(__name__)

# Kept well below the interpreter recursion limit
DEFAULT_PARSE_DEPTH = 200


class AdfParser:
    """Parser for ADF documents.

    Converts ADF JSON to structured AdfDocument and AdfNode objects.

    Example:
        >>> parser = AdfParser()
        >>> doc = parser.parse_document({"type": "doc", "version": 1, "content": []})
        >>> doc.content
        []
    """

    def __init__(self, max_depth: int = DEFAULT_PARSE_DEPTH):
        """Initialize the parser.

        Args:
            max_depth: Nesting depth past which child content is dropped
        """
        self.max_depth = max_depth

    def parse_document(self, adf_json: Any) -> Optional[AdfDocument]:
        """Parse an ADF JSON document into an AdfDocument object.

        Args:
            adf_json: The ADF document as a dictionary (parsed JSON)

        Returns:
            AdfDocument with parsed content tree, or None when the root is not
            a 'doc' node with a content list
        """
        if not isinstance(adf_json, dict):
            logger.debug(f"ADF root is not a mapping: {type(adf_json).__name__}")
            return None

        doc_type = adf_json.get("type")
        if doc_type != "doc":
            logger.debug(f"Expected root type 'doc', got '{doc_type}'")
            return None

        content_data = adf_json.get("content")
        if not isinstance(content_data, list):
            logger.debug("ADF root content is not a list")
            return None

        version = adf_json.get("version", 1)
        if not isinstance(version, int):
            version = 1

        return AdfDocument(version=version, content=self._parse_nodes(content_data, 1))

    def parse_from_string(self, adf_string: str, source: Optional[str] = None) -> Optional[AdfDocument]:
        """Parse an ADF JSON string into an AdfDocument object.

        Args:
            adf_string: The ADF document as a JSON string
            source: Optional description of where the string came from

        Returns:
            AdfDocument, or None when the envelope is not a valid document

        Raises:
            DocumentParseError: If the string is not valid JSON
        """
        try:
            adf_json = json.loads(adf_string)
        except json.JSONDecodeError as e:
            raise DocumentParseError(str(e), source) from e
        return self.parse_document(adf_json)

    def _parse_nodes(self, nodes_data: List[Any], depth: int) -> List[AdfNode]:
        nodes = []
        for node_data in nodes_data:
            if not isinstance(node_data, dict):
                logger.debug(f"Skipping malformed ADF node: {node_data!r}")
                continue
            nodes.append(self._parse_node(node_data, depth))
        return nodes

    def _parse_node(self, node_data: Dict[str, Any], depth: int) -> AdfNode:
        """Parse a single ADF node from JSON.

        Args:
            node_data: Node data as a dictionary
            depth: Nesting depth of this node (top-level blocks are 1)

        Returns:
            Parsed AdfNode object
        """
        node_type = node_data.get("type")
        if not isinstance(node_type, str) or not node_type:
            node_type = "unknown"

        text = node_data.get("text")
        if text is not None and not isinstance(text, str):
            text = str(text)

        attrs = node_data.get("attrs")
        if not isinstance(attrs, dict):
            attrs = {}

        marks = self._parse_marks(node_data.get("marks"))

        content_data = node_data.get("content")
        if not isinstance(content_data, list):
            content_data = []

        if content_data and depth >= self.max_depth:
            logger.warning(
                f"ADF nesting deeper than {self.max_depth} levels at '{node_type}'; "
                f"dropping {len(content_data)} child node(s)"
            )
            content_data = []

        return AdfNode(
            type=node_type,
            content=self._parse_nodes(content_data, depth + 1),
            text=text,
            attrs=attrs,
            marks=marks,
        )

    def _parse_marks(self, marks_data: Any) -> List[AdfMark]:
        if not isinstance(marks_data, list):
            return []

        marks = []
        for mark_data in marks_data:
            if not isinstance(mark_data, dict):
                logger.debug(f"Skipping malformed ADF mark: {mark_data!r}")
                continue
            mark_attrs = mark_data.get("attrs")
            marks.append(AdfMark(
                type=str(mark_data.get("type", "unknown")),
                attrs=mark_attrs if isinstance(mark_attrs, dict) else {},
            ))
        return marks
