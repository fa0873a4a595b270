"""Typed exception hierarchy for Confluence session errors.

This module defines all custom exceptions used by the session library.
Remote failures inherit from RemoteCallError so callers can catch every
transport or server fault in one place, while local contract violations
(such as calling a retired API on a newer server) stay distinguishable.
"""

from typing import List, Optional


class SessionError(Exception):
    """Base exception for all confluence-session errors.

    Use this to catch any application-level error from the library or CLI.
    """
    pass


class ConfluenceError(SessionError):
    """Base exception for all Confluence-related errors."""
    pass


class RemoteCallError(ConfluenceError):
    """Raised when a call to the remote Confluence service fails.

    The underlying transport or service exception is kept on ``cause``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class InvalidCredentialsError(RemoteCallError):
    """Raised when login fails or the session token is rejected."""

    def __init__(
        self,
        user: str,
        endpoint: str,
        cause: Optional[BaseException] = None,
        missing: Optional[List[str]] = None
    ):
        message = f"Authentication failed (user: {user}, endpoint: {endpoint})"
        if missing:
            message += f". Missing: {', '.join(missing)}"
        super().__init__(message, cause=cause)
        self.user = user
        self.endpoint = endpoint
        self.missing = list(missing or [])


class RemoteObjectNotFoundError(RemoteCallError):
    """Raised when the requested space, page or attachment does not exist."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        super().__init__(f"Remote object not found during {operation}", cause=cause)
        self.operation = operation


class APIUnreachableError(RemoteCallError):
    """Raised when the Confluence RPC endpoint is not available."""

    def __init__(self, endpoint: str, cause: Optional[BaseException] = None):
        super().__init__(f"API is not available at {endpoint}", cause=cause)
        self.endpoint = endpoint


class UnsupportedOnServerVersionError(ConfluenceError):
    """Raised when an operation is not supported by the server's major version.

    This is a caller error, raised before any remote call is attempted.
    """

    def __init__(self, operation: str, major_version: int, hint: Optional[str] = None):
        message = (
            f"{operation} is not supported on Confluence {major_version}.x servers"
        )
        if hint:
            message += f". {hint}"
        super().__init__(message)
        self.operation = operation
        self.major_version = major_version
