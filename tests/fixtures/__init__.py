"""Test fixtures for confluence-session tests.

This module provides:
- Sample remote structs as returned by the XML-RPC API
- Server info snapshots and in-memory file sources for session tests
"""

from .remote_structs import (
    SERVER_INFO_V3,
    SERVER_INFO_V4,
    SPACE,
    PAGE_SUMMARY,
    PAGE,
    ATTACHMENT,
)
from .session_fixtures import TOKEN, make_server_info, InMemoryFileSource

__all__ = [
    "SERVER_INFO_V3",
    "SERVER_INFO_V4",
    "SPACE",
    "PAGE_SUMMARY",
    "PAGE",
    "ATTACHMENT",
    "TOKEN",
    "make_server_info",
    "InMemoryFileSource",
]
