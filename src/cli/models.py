"""Data models for CLI operations.

This module defines the data models used by the CLI module.
All models use dataclasses, following the patterns established in
src/confluence_session/models.py.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Operation completed successfully
    - GENERAL_ERROR (1): General error (config issues, bad input, file errors)
    - AUTH_ERROR (3): Authentication or authorization failure
    - NETWORK_ERROR (4): Network connectivity or API availability issues

    Code 2 is left to Typer/Click for usage errors.
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 3
    NETWORK_ERROR = 4


@dataclass
class SessionConfig:
    """Settings loaded from .confluence-session/config.yaml.

    Attributes:
        api_namespace: XML-RPC method namespace (confluence1 or confluence2)
        timeout: HTTP timeout in seconds for each remote call
        content_type: Default content type for uploads (None to guess)
        comment: Default attachment comment
    """
    api_namespace: str = "confluence1"
    timeout: float = 30
    content_type: Optional[str] = None
    comment: str = ""
