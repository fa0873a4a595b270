"""Typed exception hierarchy for CLI-related errors.

All exceptions inherit from CLIError, which itself derives from the
library-wide SessionError.
"""

from typing import Optional

from src.confluence_session.errors import SessionError


class CLIError(SessionError):
    """Base exception for all CLI-related errors."""
    pass


class ConfigError(CLIError):
    """Raised when the configuration file is unreadable or invalid."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Config error in field '{config_field}': {message}"
        else:
            full_message = f"Config error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message
