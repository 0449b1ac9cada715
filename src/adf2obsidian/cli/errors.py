"""Typed exception hierarchy for CLI-related errors.

All exceptions inherit from CLIError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from adf2obsidian.adf_converter.errors import Adf2ObsidianError


class CLIError(Adf2ObsidianError):
    """Base exception for all CLI-related errors."""
    pass


class InputNotFoundError(CLIError):
    """Raised when the input document or page dump does not exist."""

    def __init__(self, input_path: str):
        super().__init__(
            f"Input file not found at {input_path}"
        )
        self.input_path = input_path
