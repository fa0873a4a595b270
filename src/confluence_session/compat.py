"""Server-version compatibility rules.

Confluence 4.0 changed the remote API: the original page retrieval call
no longer works, while a dedicated page-summary call became available.
VersionGate captures that decision once, from the server info snapshot
taken at login.
"""

from dataclasses import dataclass
from enum import Enum

from .models import ServerInfo

# First major version with the 4.x remote API rules
VERSION_4_MAJOR = 4


class SummaryStrategy(Enum):
    """How a page-summary request is served."""
    DIRECT = "direct"
    DERIVE_FROM_PAGE = "derive-from-page"


@dataclass(frozen=True)
class VersionGate:
    """Compatibility decisions for one server.

    Attributes:
        legacy_page_usable: True if the original page retrieval call works
        summary_strategy: DIRECT to call the summary operation,
            DERIVE_FROM_PAGE to serve summaries from the full page call

    Example:
        >>> gate = VersionGate.for_server(ServerInfo(major_version=3))
        >>> gate.summary_strategy
        <SummaryStrategy.DERIVE_FROM_PAGE: 'derive-from-page'>
    """
    legacy_page_usable: bool
    summary_strategy: SummaryStrategy

    @classmethod
    def for_server(cls, server_info: ServerInfo) -> "VersionGate":
        if is_version4(server_info):
            return cls(
                legacy_page_usable=False,
                summary_strategy=SummaryStrategy.DIRECT,
            )
        return cls(
            legacy_page_usable=True,
            summary_strategy=SummaryStrategy.DERIVE_FROM_PAGE,
        )


def is_version4(server_info: ServerInfo) -> bool:
    """Return True if the server is Confluence 4.0 or newer."""
    return server_info.major_version >= VERSION_4_MAJOR
