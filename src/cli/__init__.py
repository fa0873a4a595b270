"""Command-line interface for Confluence sessions.

This package provides the `confluence-session` CLI tool, which logs in to a
Confluence server, reports its version, and publishes local files as page
attachments.
"""

from .config import ConfigLoader
from .models import ExitCode, SessionConfig
from .errors import CLIError, ConfigError

__all__ = [
    'ConfigLoader',
    'ExitCode',
    'SessionConfig',
    'CLIError',
    'ConfigError',
]
