"""
Error types for theme variable loading and configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class ThemeVarsError(Exception):
    """Base exception for all themevars errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ConfigError(ThemeVarsError):
    """
    Raised when the editor configuration cannot be loaded.

    Examples:
    - Malformed themevars.toml
    - Wrong value types in the [editor] table
    """

    pass


class ThemeFileError(ThemeVarsError):
    """
    Raised when the theme variables file cannot be read.

    Examples:
    - File missing or permission denied
    - Content not decodable with the configured encoding
    """

    pass


@dataclass
class ErrorContext:
    """
    Location information for an error.

    Attributes:
        file: Path to the file being read
        line: Line number (1-indexed), 0 when unknown
    """

    file: Path
    line: int = 0

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "helium.scss:10"
        """
        if self.line:
            return f"{self.file}:{self.line}"
        return str(self.file)
