"""Command-line interface for ADF to Obsidian conversion.

This package provides the `adf2obsidian` CLI tool that converts single ADF
documents to Markdown and exports page dumps into Obsidian vaults.
"""

from .models import ExitCode
from .errors import CLIError, InputNotFoundError
from .output import OutputHandler

__all__ = [
    'ExitCode',
    'CLIError',
    'InputNotFoundError',
    'OutputHandler',
]
