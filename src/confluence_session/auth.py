"""Authentication module for loading Confluence credentials.

This module handles loading Confluence credentials from environment variables
using python-dotenv. It validates that all required credentials are present and
raises appropriate errors if any are missing.
"""

import logging
import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import InvalidCredentialsError

logger = logging.getLogger(__name__)


class Credentials(NamedTuple):
    """Confluence login credentials."""
    url: str
    user: str
    api_token: str

    def __repr__(self) -> str:
        return f"Credentials(url={self.url!r}, user={self.user!r}, api_token='***')"


class Authenticator:
    """Loads and validates Confluence credentials from environment variables.

    Credentials are loaded from a .env file using python-dotenv and are never
    cached or logged.

    Required environment variables:
        CONFLUENCE_URL: Confluence site URL (e.g., https://wiki.example.com)
        CONFLUENCE_USER: Confluence user name
        CONFLUENCE_API_TOKEN: Password or API token used for login

    Example:
        >>> creds = Authenticator().get_credentials()
        >>> service = XmlRpcService.from_url(creds.url)
    """

    REQUIRED_VARIABLES = ("CONFLUENCE_URL", "CONFLUENCE_USER", "CONFLUENCE_API_TOKEN")

    def __init__(self):
        load_dotenv()

    def get_credentials(self) -> Credentials:
        """Get Confluence credentials from environment variables.

        Returns:
            Credentials: A named tuple containing url, user, and api_token

        Raises:
            InvalidCredentialsError: If any required credential is missing
        """
        values = {name: os.getenv(name) for name in self.REQUIRED_VARIABLES}
        missing = [name for name, value in values.items() if not value]

        url = values["CONFLUENCE_URL"]
        user = values["CONFLUENCE_USER"]
        if missing:
            logger.error(f"Missing credential variables: {', '.join(missing)}")
            raise InvalidCredentialsError(
                user=user or "unknown",
                endpoint=url or "unknown",
                missing=missing,
            )

        return Credentials(
            url=url,  # type: ignore[arg-type]
            user=user,  # type: ignore[arg-type]
            api_token=values["CONFLUENCE_API_TOKEN"],  # type: ignore[arg-type]
        )
