"""Authenticated session over the Confluence remote API.

ConfluenceSession threads the login token through every remote call,
hides the API differences between pre-4.0 and 4.0+ servers, and turns
local or remote files into attachment uploads.
"""

import logging
import os
import warnings
from typing import Any, Callable, List, TypeVar, Union

from .attachments import FileSource, build_attachment, read_file_source, read_local_file
from .compat import SummaryStrategy, VersionGate, is_version4
from .errors import (
    ConfluenceError,
    InvalidCredentialsError,
    RemoteCallError,
    UnsupportedOnServerVersionError,
)
from .models import Attachment, Page, PageSummary, PageUpdateOptions, ServerInfo, Space
from .service import RemoteService

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConfluenceSession:
    """Connection to a Confluence server for one logged-in user.

    The service handle, token and server info are fixed at construction
    and exposed read-only, so one session can be shared between threads.
    Use open_session() to log in and create a session.

    Example:
        >>> session = open_session(XmlRpcService.from_url(url), user, token)
        >>> summary = session.get_page_summary("TEAM", "Build Results")
        >>> session.add_attachment_from_path(summary.id, "report.html", "text/html", "")
    """

    __slots__ = ("_service", "_token", "_server_info", "_gate")

    def __init__(self, service: RemoteService, token: str, server_info: ServerInfo):
        """Initialize a session from the results of a login.

        Args:
            service: Remote service handle
            token: Authentication token returned by login
            server_info: Server info snapshot taken right after login
        """
        self._service = service
        self._token = token
        self._server_info = server_info
        self._gate = VersionGate.for_server(server_info)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(server={self._server_info.version_string}, "
            f"base_url={self._server_info.base_url!r})"
        )

    @property
    def service(self) -> RemoteService:
        return self._service

    @property
    def token(self) -> str:
        return self._token

    @property
    def server_info(self) -> ServerInfo:
        return self._server_info

    def _invoke(self, operation: str, call: Callable[..., T], *args: Any) -> T:
        """Call the remote service with the token as first argument.

        Failures that are not already typed are wrapped in RemoteCallError.
        """
        logger.debug(f"Remote call: {operation}")
        try:
            return call(self._token, *args)
        except ConfluenceError:
            raise
        except Exception as e:
            raise RemoteCallError(
                f"Confluence API failure during {operation}", cause=e
            ) from e

    def get_server_info(self) -> ServerInfo:
        """Return the server info snapshot taken at login. Never calls the server."""
        return self._server_info

    def is_version4(self) -> bool:
        """Return True if the server is Confluence 4.0 or newer."""
        return is_version4(self._server_info)

    def get_space(self, space_key: str) -> Space:
        """Get a space by key.

        Raises:
            RemoteCallError: If the space does not exist or the call fails
        """
        return self._invoke(f"get_space({space_key})", self._service.get_space, space_key)

    def get_page(self, space_key: str, page_key: str) -> Page:
        """Get a page, including content, by space key and page title.

        Deprecated: the underlying call is broken on Confluence 4.0 and
        newer. Use get_page_summary() instead.

        Raises:
            UnsupportedOnServerVersionError: On 4.0+ servers (no call is made)
            RemoteCallError: If the remote call fails
        """
        warnings.warn(
            "get_page() does not work against Confluence 4.0+; use get_page_summary()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._get_legacy_page(space_key, page_key)

    def _get_legacy_page(self, space_key: str, page_key: str) -> Page:
        if not self._gate.legacy_page_usable:
            raise UnsupportedOnServerVersionError(
                "get_page",
                self._server_info.major_version,
                hint="Use get_page_summary()",
            )
        return self._invoke(
            f"get_page({space_key}, {page_key})",
            self._service.get_page,
            space_key,
            page_key,
        )

    def get_page_summary(self, space_key: str, page_key: str) -> PageSummary:
        """Get a page without its content.

        Pre-4.0 servers have no summary call, so the full page is fetched
        and returned as the summary.

        Raises:
            RemoteCallError: If the remote call fails
        """
        if self._gate.summary_strategy is SummaryStrategy.DERIVE_FROM_PAGE:
            return self._get_legacy_page(space_key, page_key)

        return self._invoke(
            f"get_page_summary({space_key}, {page_key})",
            self._service.get_page_summary,
            space_key,
            page_key,
        )

    def store_page(self, page: Page) -> Page:
        """Create or update a page.

        Args:
            page: Page record to store

        Returns:
            Page record as stored by the server

        Raises:
            RemoteCallError: If the remote call fails
        """
        return self._invoke(f"store_page({page.title})", self._service.store_page, page)

    def update_page(self, page: Page, options: PageUpdateOptions) -> Page:
        """Update an existing page with a version comment and minor-edit flag.

        Args:
            page: Page record with the new content
            options: Update options sent alongside the page

        Returns:
            Page record as updated by the server

        Raises:
            RemoteCallError: If the remote call fails
        """
        return self._invoke(
            f"update_page({page.id})", self._service.update_page, page, options
        )

    def get_attachments(self, page_id: int) -> List[Attachment]:
        """Get all attachments of a page; empty list if there are none."""
        attachments = self._invoke(
            f"get_attachments({page_id})", self._service.get_attachments, page_id
        )
        return list(attachments or [])

    def add_attachment(
        self,
        page_id: int,
        file_name: str,
        content_type: str,
        comment: str,
        data: bytes
    ) -> Attachment:
        """Attach a payload to a page.

        All uploads pass through here. The file name is sanitized and the
        recorded size is the payload length.

        Args:
            page_id: Id of the page to attach to
            file_name: Attachment file name (sanitized before upload)
            content_type: MIME type of the payload
            comment: Attachment comment
            data: Complete file contents

        Returns:
            Attachment record created on the server

        Raises:
            RemoteCallError: If the upload fails
        """
        attachment = build_attachment(page_id, file_name, content_type, comment, data)
        logger.info(
            f"Uploading attachment {attachment.file_name} "
            f"({attachment.file_size} bytes) to page {page_id}"
        )
        return self._invoke(
            f"add_attachment({page_id}, {attachment.file_name})",
            self._service.add_attachment,
            attachment,
            data,
        )

    def add_attachment_from_source(
        self,
        page_id: int,
        source: FileSource,
        content_type: str,
        comment: str
    ) -> Attachment:
        """Attach a file exposed through a FileSource.

        The file is copied completely into memory before the upload starts.

        Raises:
            OSError: If copying the file fails
            RemoteCallError: If the upload fails
        """
        name, data = read_file_source(source)
        return self.add_attachment(page_id, name, content_type, comment, data)

    def add_attachment_from_path(
        self,
        page_id: int,
        path: Union[str, "os.PathLike[str]"],
        content_type: str,
        comment: str
    ) -> Attachment:
        """Attach a local file.

        The file is read completely into memory before the upload starts.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            RemoteCallError: If the upload fails
        """
        name, data = read_local_file(path)
        return self.add_attachment(page_id, name, content_type, comment, data)

    def logout(self) -> bool:
        """Invalidate the session token on the server.

        The session object stays unchanged; calls made after logout are
        rejected by the server.

        Returns:
            True if the server accepted the logout

        Raises:
            RemoteCallError: If the remote call fails
        """
        accepted = bool(self._invoke("logout", self._service.logout))
        logger.info(f"Logged out (accepted: {accepted})")
        return accepted


def open_session(service: RemoteService, username: str, password: str) -> ConfluenceSession:
    """Log in and create a session.

    Fetches the server info once; the session keeps that snapshot for its
    whole lifetime.

    Args:
        service: Remote service handle
        username: Confluence user name
        password: Password or API token

    Returns:
        A ready-to-use ConfluenceSession

    Raises:
        InvalidCredentialsError: If login is rejected
        RemoteCallError: If the server cannot be reached or fails
    """
    try:
        token = service.login(username, password)
    except ConfluenceError:
        raise
    except Exception as e:
        raise RemoteCallError("Confluence API failure during login", cause=e) from e

    if not token:
        raise InvalidCredentialsError(
            user=username, endpoint=getattr(service, "endpoint", "unknown")
        )

    try:
        server_info = service.get_server_info(token)
    except ConfluenceError:
        raise
    except Exception as e:
        raise RemoteCallError(
            "Confluence API failure during get_server_info", cause=e
        ) from e

    logger.info(
        f"Logged in as {username} to Confluence {server_info.version_string}"
    )
    return ConfluenceSession(service, token, server_info)
