"""Root pytest configuration for all tests.

Provides a mock remote service and sessions against 3.x and 4.x servers.
"""

import logging
from unittest.mock import Mock

import pytest

from src.confluence_session.session import ConfluenceSession
from tests.fixtures.session_fixtures import TOKEN, make_server_info

# urllib3 logs connection retries at WARNING; keep test output readable
logging.getLogger("urllib3").setLevel(logging.ERROR)


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers the CLI attaches to the 'src' logger between tests."""
    app_logger = logging.getLogger("src")
    level = app_logger.level
    yield
    app_logger.handlers.clear()
    app_logger.setLevel(level)


@pytest.fixture
def mock_service():
    """Remote service double; every call succeeds with a Mock by default."""
    return Mock()


@pytest.fixture
def session_v3(mock_service):
    """Session against a Confluence 3.x server."""
    return ConfluenceSession(mock_service, TOKEN, make_server_info(3))


@pytest.fixture
def session_v4(mock_service):
    """Session against a Confluence 4.x server."""
    return ConfluenceSession(mock_service, TOKEN, make_server_info(4))
