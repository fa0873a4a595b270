"""Session test fixtures: server info snapshots and file sources."""

from typing import BinaryIO, Optional

from src.confluence_session.models import ServerInfo

TOKEN = "token-abc123"


def make_server_info(major_version: int) -> ServerInfo:
    """Create a server info snapshot for the given major version."""
    return ServerInfo(
        major_version=major_version,
        minor_version=2,
        patch_level=1,
        build_id="1234",
        base_url="https://wiki.example.com",
    )


class InMemoryFileSource:
    """FileSource backed by a byte string, optionally failing mid-copy."""

    def __init__(self, name: str, data: bytes, fail_with: Optional[Exception] = None):
        self.name = name
        self.data = data
        self.fail_with = fail_with
        self.sink: Optional[BinaryIO] = None

    def size(self) -> int:
        return len(self.data)

    def copy_to(self, sink: BinaryIO) -> None:
        self.sink = sink
        sink.write(self.data[: len(self.data) // 2])
        if self.fail_with is not None:
            raise self.fail_with
        sink.write(self.data[len(self.data) // 2:])
