"""Errors raised while reading page dumps and config files and writing vaults.

Every error derives from FileMapperError, which itself derives from the
package-wide Adf2ObsidianError, so the CLI can report them uniformly.
"""

from typing import Optional

from adf2obsidian.adf_converter.errors import Adf2ObsidianError


class FileMapperError(Adf2ObsidianError):
    """Base class for vault export and configuration errors."""


class FilesystemError(FileMapperError):
    """A file or directory could not be read, written or created.

    Attributes:
        file_path: Path the operation was attempted on
        operation: One of 'read', 'write', 'create_directory' or 'hierarchy'
        reason: Underlying OS error text or a short explanation
    """

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        detail = f": {reason}" if reason else ""
        super().__init__(f"Could not complete '{operation}' on {file_path}{detail}")
        self.file_path = file_path
        self.operation = operation
        self.reason = reason


class ConfigError(FileMapperError):
    """A configuration value is missing, malformed or out of range."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        location = f" in field '{config_field}'" if config_field else ""
        super().__init__(f"Configuration error{location}: {message}")
        self.config_field = config_field
        self.original_message = message


class PageDumpError(FileMapperError):
    """A page dump is not valid JSON or is not a list of pages."""

    def __init__(self, file_path: str, message: str):
        super().__init__(f"Page dump error in {file_path}: {message}")
        self.file_path = file_path
        self.message = message
