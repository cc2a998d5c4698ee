"""
Error types for tokensync input loading and configuration.

Resolution problems (dead aliases, reference cycles) are never raised;
they are collected on a ResolutionReport instead.
"""

from pathlib import Path


class TokenSyncError(Exception):
    """Base exception for all tokensync errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending path if available."""
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class TokenInputError(TokenSyncError):
    """
    Raised when the raw token document cannot be loaded.

    Examples:
    - No tokens.json at any candidate path
    - Malformed JSON
    - Root is not a JSON object
    """

    pass


class ConfigError(TokenSyncError):
    """
    Raised when tokensync.toml cannot be parsed.

    Examples:
    - Invalid TOML syntax
    - Wrong value type for a known key
    """

    pass
