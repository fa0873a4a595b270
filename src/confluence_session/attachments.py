"""Attachment upload assembly.

Turns a file name, a byte source and upload metadata into an Attachment
record ready for submission. The remote addAttachment call needs the full
payload up front, so files are always read completely into memory before
anything is sent.
"""

import io
import logging
import os
from pathlib import Path
from typing import BinaryIO, Optional, Protocol, Tuple, Union

from .models import Attachment

logger = logging.getLogger(__name__)

# Characters the server rejects or mangles in attachment names
_UNSAFE_NAME_CHARS = ("+", "&")


class FileSource(Protocol):
    """A file that can be copied into a local sink, possibly from another host.

    Attributes:
        name: Base name of the file (no directory part)
    """

    name: str

    def size(self) -> int:
        """Return the file length in bytes as reported by its host."""
        ...

    def copy_to(self, sink: BinaryIO) -> None:
        """Write the complete file contents to sink."""
        ...


def sanitize_file_name(file_name: Optional[str]) -> Optional[str]:
    """Sanitize an attachment file name per Confluence restrictions.

    Replaces every '+' and '&' with '_', then trims surrounding whitespace.
    An empty or all-whitespace result is treated as absent.

    Args:
        file_name: Name to sanitize, or None

    Returns:
        The sanitized name, or None if nothing usable remains

    Example:
        >>> sanitize_file_name("a+b&c")
        'a_b_c'
        >>> sanitize_file_name("   ") is None
        True
    """
    if file_name is None:
        return None
    for char in _UNSAFE_NAME_CHARS:
        file_name = file_name.replace(char, "_")
    file_name = file_name.strip()
    return file_name or None


def build_attachment(
    page_id: int,
    file_name: Optional[str],
    content_type: str,
    comment: str,
    data: bytes
) -> Attachment:
    """Build the upload record for a payload.

    The file size is always the length of the payload actually produced.
    """
    return Attachment(
        page_id=page_id,
        file_name=sanitize_file_name(file_name),
        file_size=len(data),
        content_type=content_type,
        comment=comment,
    )


def read_local_file(path: Union[str, "os.PathLike[str]"]) -> Tuple[str, bytes]:
    """Read a local file completely into memory.

    The length is taken from the open file's metadata and at most that many
    bytes are read, so the payload reflects the file as it was when opened.

    Args:
        path: Path to the file

    Returns:
        Tuple of (base name, file contents)

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file cannot be opened or read
    """
    file_path = Path(path)
    with open(file_path, "rb") as handle:
        length = os.fstat(handle.fileno()).st_size
        data = handle.read(length)

    if len(data) != length:
        logger.warning(
            f"Read {len(data)} bytes from {file_path.name}, expected {length}"
        )
    return file_path.name, data


def read_file_source(source: FileSource) -> Tuple[str, bytes]:
    """Copy a FileSource completely into memory.

    Args:
        source: The file to copy

    Returns:
        Tuple of (base name, file contents)

    Raises:
        OSError: If copying from the source fails
    """
    expected = source.size()
    with io.BytesIO() as sink:
        source.copy_to(sink)
        data = sink.getvalue()

    if len(data) != expected:
        logger.warning(
            f"Copied {len(data)} bytes from {source.name}, expected {expected}"
        )
    return source.name, data
