"""Test fixtures for ADF conversion tests.

This module provides builders for ADF nodes and a few ready-made documents
used across the converter, vault and CLI test suites.
"""

from .adf_fixtures import (
    ADF_EMPTY,
    ADF_KITCHEN_SINK,
    ADF_MINIMAL,
    create_adf_doc,
    create_heading,
    create_paragraph,
    create_text,
)

__all__ = [
    "ADF_EMPTY",
    "ADF_KITCHEN_SINK",
    "ADF_MINIMAL",
    "create_adf_doc",
    "create_heading",
    "create_paragraph",
    "create_text",
]
