"""Remote service interface and its XML-RPC binding.

RemoteService describes the calls the session needs from the Confluence
remote API. XmlRpcService implements it against the server's XML-RPC
endpoint, carried over HTTP with requests, and translates transport and
server faults into our typed exception hierarchy.
"""

import logging
import xmlrpc.client
from abc import abstractmethod
from typing import Any, Dict, List, Optional, Protocol

import requests
from requests.exceptions import ConnectionError, Timeout

from .errors import (
    APIUnreachableError,
    ConfluenceError,
    InvalidCredentialsError,
    RemoteCallError,
    RemoteObjectNotFoundError,
)
from .models import Attachment, Page, PageSummary, PageUpdateOptions, ServerInfo, Space

logger = logging.getLogger(__name__)

XMLRPC_PATH = "/rpc/xmlrpc"
DEFAULT_NAMESPACE = "confluence1"
SUPPORTED_NAMESPACES = ("confluence1", "confluence2")
DEFAULT_TIMEOUT = 30

_AUTH_FAULT_MARKERS = (
    "authenticationfailedexception",
    "invalidsessionexception",
    "not permitted",
)
_NOT_FOUND_FAULT_MARKERS = (
    "does not exist",
    "not found",
    "no space",
)


class RemoteService(Protocol):
    """Calls offered by the Confluence remote API.

    Every call except login takes the authentication token first.
    """

    @abstractmethod
    def login(self, username: str, password: str) -> str:
        """Log in and return an authentication token."""

    @abstractmethod
    def logout(self, token: str) -> bool:
        """Invalidate the token."""

    @abstractmethod
    def get_server_info(self, token: str) -> ServerInfo:
        """Return the server's identity."""

    @abstractmethod
    def get_space(self, token: str, space_key: str) -> Space:
        """Return a space by key."""

    @abstractmethod
    def get_page(self, token: str, space_key: str, page_title: str) -> Page:
        """Return a full page, including content."""

    @abstractmethod
    def get_page_summary(self, token: str, space_key: str, page_title: str) -> PageSummary:
        """Return a page without its content (4.0+ servers only)."""

    @abstractmethod
    def store_page(self, token: str, page: Page) -> Page:
        """Create or update a page and return the stored record."""

    @abstractmethod
    def update_page(self, token: str, page: Page, options: PageUpdateOptions) -> Page:
        """Update a page with options and return the updated record."""

    @abstractmethod
    def get_attachments(self, token: str, page_id: int) -> List[Attachment]:
        """Return all attachments of a page."""

    @abstractmethod
    def add_attachment(self, token: str, attachment: Attachment, data: bytes) -> Attachment:
        """Upload an attachment and return the record created by the server."""


class RequestsTransport(xmlrpc.client.Transport):
    """XML-RPC transport that sends requests through a requests.Session.

    Gives XML-RPC calls the same timeout and connection handling as the
    rest of the HTTP stack.
    """

    def __init__(
        self,
        scheme: str = "https",
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        super().__init__()
        self._scheme = scheme
        self._timeout = timeout
        self._session = session or requests.Session()

    def request(self, host, handler, request_body, verbose=False):
        url = f"{self._scheme}://{host}{handler}"
        response = self._session.post(
            url,
            data=request_body,
            headers={"Content-Type": "text/xml"},
            timeout=self._timeout,
        )
        if response.status_code != 200:
            raise xmlrpc.client.ProtocolError(
                url,
                response.status_code,
                response.reason,
                dict(response.headers),
            )

        parser, unmarshaller = self.getparser()
        parser.feed(response.content)
        parser.close()
        return unmarshaller.close()


def translate_error(
    exception: Exception,
    operation: str,
    endpoint: str,
    user: str = "unknown"
) -> ConfluenceError:
    """Translate transport and XML-RPC faults to typed exceptions.

    Args:
        exception: The original exception
        operation: Description of the operation that failed
        endpoint: RPC endpoint URL (for error messages)
        user: User name, if known (for authentication errors)

    Returns:
        A RemoteCallError subclass carrying the original exception
    """
    if isinstance(exception, ConfluenceError):
        return exception

    if isinstance(exception, (Timeout, ConnectionError)):
        return APIUnreachableError(endpoint=endpoint, cause=exception)

    if isinstance(exception, xmlrpc.client.ProtocolError):
        if exception.errcode in (401, 403):
            return InvalidCredentialsError(user=user, endpoint=endpoint, cause=exception)
        return APIUnreachableError(endpoint=endpoint, cause=exception)

    if isinstance(exception, xmlrpc.client.Fault):
        fault_text = str(exception.faultString).lower()
        if any(marker in fault_text for marker in _AUTH_FAULT_MARKERS):
            return InvalidCredentialsError(user=user, endpoint=endpoint, cause=exception)
        if any(marker in fault_text for marker in _NOT_FOUND_FAULT_MARKERS):
            return RemoteObjectNotFoundError(operation=operation, cause=exception)

    return RemoteCallError(
        f"Confluence API failure during {operation}",
        cause=exception,
    )


class XmlRpcService:
    """RemoteService implementation over the Confluence XML-RPC API.

    Example:
        >>> service = XmlRpcService.from_url("https://wiki.example.com")
        >>> token = service.login("builder", "secret")
        >>> info = service.get_server_info(token)
    """

    def __init__(
        self,
        endpoint: str,
        namespace: str = DEFAULT_NAMESPACE,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        """Initialize the service binding.

        Args:
            endpoint: Full XML-RPC endpoint URL
            namespace: Method namespace, confluence1 or confluence2
            timeout: HTTP timeout in seconds for each call
            session: Optional requests.Session to send calls through

        Raises:
            ValueError: If the namespace is not supported
        """
        if namespace not in SUPPORTED_NAMESPACES:
            raise ValueError(
                f"Unsupported API namespace '{namespace}'. "
                f"Expected one of: {', '.join(SUPPORTED_NAMESPACES)}"
            )
        self.endpoint = endpoint
        self.namespace = namespace
        self._user = "unknown"

        scheme = endpoint.split("://", 1)[0] if "://" in endpoint else "https"
        transport = RequestsTransport(scheme=scheme, timeout=timeout, session=session)
        self._proxy = xmlrpc.client.ServerProxy(
            endpoint,
            transport=transport,
            allow_none=True,
        )

    @classmethod
    def from_url(cls, base_url: str, **kwargs: Any) -> "XmlRpcService":
        """Create a service for a Confluence site URL."""
        return cls(base_url.rstrip("/") + XMLRPC_PATH, **kwargs)

    def _call(self, method: str, *args: Any, token: Optional[str] = None) -> Any:
        """Invoke a namespaced XML-RPC method, translating failures."""
        qualified = f"{self.namespace}.{method}"
        try:
            return getattr(self._proxy, qualified)(*args)
        except Exception as e:
            error = translate_error(e, qualified, self.endpoint, self._user)
            message = str(e)
            if token:
                message = message.replace(token, "***REDACTED***")
            logger.error(f"XML-RPC call failed: {qualified} - {message}")
            raise error from e

    def login(self, username: str, password: str) -> str:
        """Log in and return the authentication token.

        Args:
            username: Confluence user name
            password: Password or API token

        Returns:
            Token to pass to every other call

        Raises:
            InvalidCredentialsError: If the server rejects the credentials
            APIUnreachableError: If the endpoint cannot be reached
        """
        self._user = username
        return self._call("login", username, password)

    def logout(self, token: str) -> bool:
        """Invalidate a token.

        Returns:
            True if the server accepted the logout

        Raises:
            RemoteCallError: If the call fails
        """
        return bool(self._call("logout", token, token=token))

    def get_server_info(self, token: str) -> ServerInfo:
        """Get the server's version and base URL.

        Raises:
            RemoteCallError: If the call fails
        """
        return ServerInfo.from_remote(self._call("getServerInfo", token, token=token))

    def get_space(self, token: str, space_key: str) -> Space:
        """Get a space by key.

        Raises:
            RemoteObjectNotFoundError: If the space does not exist
            RemoteCallError: If the call fails
        """
        return Space.from_remote(self._call("getSpace", token, space_key, token=token))

    def get_page(self, token: str, space_key: str, page_title: str) -> Page:
        """Get a full page, including content.

        Args:
            token: Authentication token
            space_key: Key of the space holding the page
            page_title: Page title

        Returns:
            Page record

        Raises:
            RemoteObjectNotFoundError: If the page does not exist
            RemoteCallError: If the call fails
        """
        return Page.from_remote(
            self._call("getPage", token, space_key, page_title, token=token)
        )

    def get_page_summary(self, token: str, space_key: str, page_title: str) -> PageSummary:
        """Get a page without its content. Only 4.0+ servers offer this call.

        Args:
            token: Authentication token
            space_key: Key of the space holding the page
            page_title: Page title

        Returns:
            PageSummary record

        Raises:
            RemoteObjectNotFoundError: If the page does not exist
            RemoteCallError: If the call fails
        """
        return PageSummary.from_remote(
            self._call("getPageSummary", token, space_key, page_title, token=token)
        )

    def store_page(self, token: str, page: Page) -> Page:
        """Create or update a page.

        Returns:
            Page record as stored by the server

        Raises:
            RemoteCallError: If the call fails
        """
        return Page.from_remote(
            self._call("storePage", token, page.to_remote(), token=token)
        )

    def update_page(self, token: str, page: Page, options: PageUpdateOptions) -> Page:
        """Update a page with a version comment and minor-edit flag.

        Returns:
            Page record as updated by the server

        Raises:
            RemoteCallError: If the call fails
        """
        return Page.from_remote(
            self._call(
                "updatePage", token, page.to_remote(), options.to_remote(), token=token
            )
        )

    def get_attachments(self, token: str, page_id: int) -> List[Attachment]:
        """Get all attachments of a page.

        Returns:
            Attachment records; empty if the server replies with nothing

        Raises:
            RemoteCallError: If the call fails
        """
        structs: Optional[List[Dict[str, Any]]] = self._call(
            "getAttachments", token, str(page_id), token=token
        )
        return [Attachment.from_remote(struct) for struct in structs or []]

    def add_attachment(self, token: str, attachment: Attachment, data: bytes) -> Attachment:
        """Upload an attachment.

        Args:
            token: Authentication token
            attachment: Attachment record (page id, name, size, type, comment)
            data: Complete file contents, sent as base64 binary

        Returns:
            Attachment record created by the server

        Raises:
            RemoteCallError: If the upload fails
        """
        return Attachment.from_remote(
            self._call(
                "addAttachment",
                token,
                str(attachment.page_id),
                attachment.to_remote(),
                xmlrpc.client.Binary(data),
                token=token,
            )
        )
