"""Data models for records exchanged with the Confluence RPC interface.

All models are dataclasses. Each record converts to and from the remote
struct representation (camelCase keys, numeric values often sent as
strings) with ``from_remote`` and ``to_remote``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _to_int(value: Any, default: Optional[int] = 0) -> Optional[int]:
    """Coerce a remote numeric value (int or numeric string) to int."""
    if value is None or value == "":
        return default
    return int(value)


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def _to_str(value: Any) -> str:
    return "" if value is None else str(value)


def _struct(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Drop unset values and stringify identifiers for the wire."""
    result: Dict[str, Any] = {}
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, int) and not isinstance(value, bool):
            # XML-RPC integers are 32-bit; ids and sizes can exceed that
            value = str(value)
        result[key] = value
    return result


@dataclass(frozen=True)
class ServerInfo:
    """Snapshot of the remote server's identity, taken at login.

    Attributes:
        major_version: Major version number (e.g., 3 or 4)
        minor_version: Minor version number
        patch_level: Patch level
        build_id: Server build identifier
        development_build: True for development (non-release) builds
        base_url: Base URL reported by the server
    """
    major_version: int
    minor_version: int = 0
    patch_level: int = 0
    build_id: str = ""
    development_build: bool = False
    base_url: str = ""

    @classmethod
    def from_remote(cls, data: Dict[str, Any]) -> "ServerInfo":
        return cls(
            major_version=_to_int(data.get("majorVersion")),  # type: ignore[arg-type]
            minor_version=_to_int(data.get("minorVersion")),  # type: ignore[arg-type]
            patch_level=_to_int(data.get("patchLevel")),  # type: ignore[arg-type]
            build_id=_to_str(data.get("buildId")),
            development_build=_to_bool(data.get("developmentBuild", False)),
            base_url=_to_str(data.get("baseUrl")),
        )

    @property
    def version_string(self) -> str:
        return f"{self.major_version}.{self.minor_version}.{self.patch_level}"


@dataclass
class Space:
    """Confluence space metadata."""
    key: str
    name: str = ""
    url: str = ""
    home_page: Optional[int] = None
    description: str = ""
    type: str = "global"

    @classmethod
    def from_remote(cls, data: Dict[str, Any]) -> "Space":
        return cls(
            key=_to_str(data.get("key")),
            name=_to_str(data.get("name")),
            url=_to_str(data.get("url")),
            home_page=_to_int(data.get("homePage"), default=None),
            description=_to_str(data.get("description")),
            type=_to_str(data.get("type")) or "global",
        )

    def to_remote(self) -> Dict[str, Any]:
        return _struct({
            "key": self.key,
            "name": self.name,
            "url": self.url,
            "homePage": self.home_page,
            "description": self.description,
            "type": self.type,
        })


@dataclass
class PageSummary:
    """Page metadata without body content.

    Attributes:
        id: Server-assigned page id (None for pages not yet stored)
        space: Key of the space holding the page
        parent_id: Parent page id (None for top-level pages)
        title: Page title, which doubles as the page key within a space
        url: Page URL
        locks: Number of locks on the page
    """
    id: Optional[int] = None
    space: str = ""
    parent_id: Optional[int] = None
    title: str = ""
    url: str = ""
    locks: int = 0

    @classmethod
    def from_remote(cls, data: Dict[str, Any]) -> "PageSummary":
        return cls(**cls._summary_fields(data))

    @staticmethod
    def _summary_fields(data: Dict[str, Any]) -> Dict[str, Any]:
        parent_id = _to_int(data.get("parentId"), default=None)
        return {
            "id": _to_int(data.get("id"), default=None),
            "space": _to_str(data.get("space")),
            # The service reports top-level pages with parentId 0
            "parent_id": parent_id or None,
            "title": _to_str(data.get("title")),
            "url": _to_str(data.get("url")),
            "locks": _to_int(data.get("locks")),
        }

    def to_remote(self) -> Dict[str, Any]:
        return _struct({
            "id": self.id,
            "space": self.space,
            "parentId": self.parent_id,
            "title": self.title,
            "url": self.url or None,
        })


@dataclass
class Page(PageSummary):
    """Full page record, including its storage-format content."""
    version: int = 0
    content: str = ""
    created: str = ""
    creator: str = ""
    modified: str = ""
    modifier: str = ""
    home_page: bool = False
    content_status: str = "current"
    current: bool = True

    @classmethod
    def from_remote(cls, data: Dict[str, Any]) -> "Page":
        return cls(
            **cls._summary_fields(data),
            version=_to_int(data.get("version")),  # type: ignore[arg-type]
            content=_to_str(data.get("content")),
            created=_to_str(data.get("created")),
            creator=_to_str(data.get("creator")),
            modified=_to_str(data.get("modified")),
            modifier=_to_str(data.get("modifier")),
            home_page=_to_bool(data.get("homePage", False)),
            content_status=_to_str(data.get("contentStatus")) or "current",
            current=_to_bool(data.get("current", True)),
        )

    def to_remote(self) -> Dict[str, Any]:
        struct = super().to_remote()
        struct.update(_struct({
            "version": self.version or None,
            "content": self.content,
        }))
        return struct


@dataclass
class Attachment:
    """Attachment metadata.

    On upload only page_id, file_name, file_size, content_type and comment
    are sent; the remaining fields are filled in by the server.
    """
    page_id: int
    file_name: Optional[str]
    file_size: int = 0
    content_type: str = ""
    comment: str = ""
    id: Optional[int] = None
    title: str = ""
    created: str = ""
    creator: str = ""
    url: str = ""

    @classmethod
    def from_remote(cls, data: Dict[str, Any]) -> "Attachment":
        return cls(
            page_id=_to_int(data.get("pageId")),  # type: ignore[arg-type]
            file_name=data.get("fileName"),
            file_size=_to_int(data.get("fileSize")),  # type: ignore[arg-type]
            content_type=_to_str(data.get("contentType")),
            comment=_to_str(data.get("comment")),
            id=_to_int(data.get("id"), default=None),
            title=_to_str(data.get("title")),
            created=_to_str(data.get("created")),
            creator=_to_str(data.get("creator")),
            url=_to_str(data.get("url")),
        )

    def to_remote(self) -> Dict[str, Any]:
        return _struct({
            "pageId": self.page_id,
            "fileName": self.file_name,
            "fileSize": self.file_size,
            "contentType": self.content_type,
            "comment": self.comment,
        })


@dataclass
class PageUpdateOptions:
    """Options sent along with a page update; passed through unchanged."""
    version_comment: str = ""
    minor_edit: bool = False

    def to_remote(self) -> Dict[str, Any]:
        return {
            "versionComment": self.version_comment,
            "minorEdit": self.minor_edit,
        }
