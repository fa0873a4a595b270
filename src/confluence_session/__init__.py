"""Confluence session library.

This package provides an authenticated session over the Confluence remote
API that hides token handling, server-version differences and the mechanics
of uploading files as page attachments.
"""

from .attachments import FileSource, sanitize_file_name
from .auth import Authenticator, Credentials
from .compat import SummaryStrategy, VersionGate
from .errors import (
    SessionError,
    ConfluenceError,
    RemoteCallError,
    InvalidCredentialsError,
    RemoteObjectNotFoundError,
    APIUnreachableError,
    UnsupportedOnServerVersionError,
)
from .models import Attachment, Page, PageSummary, PageUpdateOptions, ServerInfo, Space
from .service import RemoteService, XmlRpcService
from .session import ConfluenceSession, open_session

__all__ = [
    "ConfluenceSession",
    "open_session",
    "RemoteService",
    "XmlRpcService",
    "Authenticator",
    "Credentials",
    "VersionGate",
    "SummaryStrategy",
    "FileSource",
    "sanitize_file_name",
    "ServerInfo",
    "Space",
    "PageSummary",
    "Page",
    "Attachment",
    "PageUpdateOptions",
    "SessionError",
    "ConfluenceError",
    "RemoteCallError",
    "InvalidCredentialsError",
    "RemoteObjectNotFoundError",
    "APIUnreachableError",
    "UnsupportedOnServerVersionError",
]
