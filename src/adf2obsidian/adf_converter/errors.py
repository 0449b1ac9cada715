"""Typed exception hierarchy for adf2obsidian errors.

This module defines the base exception for the whole package and the errors
raised by the conversion engine. The engine itself is fail-soft for input
conditions; these exceptions cover construction-time bugs and the file layer
that feeds documents into the engine.
"""

from typing import Optional


class Adf2ObsidianError(Exception):
    """Base exception for all adf2obsidian errors.

    Use this to catch any application-level error from the converter.
    """
    pass


class ConverterRegistrationError(Adf2ObsidianError):
    """Raised when two converters claim the same ADF node type."""

    def __init__(self, node_type: str, existing: str, duplicate: str):
        super().__init__(
            f"Node type '{node_type}' is already handled by {existing}; "
            f"{duplicate} cannot register it again"
        )
        self.node_type = node_type
        self.existing = existing
        self.duplicate = duplicate


class DocumentParseError(Adf2ObsidianError):
    """Raised when an ADF document string is not valid JSON."""

    def __init__(self, message: str, source: Optional[str] = None):
        if source:
            full_message = f"Cannot parse ADF document from {source}: {message}"
        else:
            full_message = f"Cannot parse ADF document: {message}"
        super().__init__(full_message)
        self.source = source
        self.original_message = message
