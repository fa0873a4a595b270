"""Unit tests for confluence_session.auth module."""

from unittest.mock import patch

import pytest

from src.confluence_session.auth import Authenticator, Credentials
from src.confluence_session.errors import InvalidCredentialsError

ENV = {
    'CONFLUENCE_URL': 'https://wiki.example.com',
    'CONFLUENCE_USER': 'builder',
    'CONFLUENCE_API_TOKEN': 'secret-token',
}


class TestCredentials:
    """Test cases for Credentials NamedTuple."""

    def test_credentials_are_immutable(self):
        creds = Credentials(url="https://wiki.example.com", user="builder", api_token="t")
        with pytest.raises(AttributeError):
            creds.url = "different-url"

    def test_repr_masks_token(self):
        creds = Credentials(url="https://wiki.example.com", user="builder", api_token="secret")
        assert "secret" not in repr(creds)


class TestAuthenticator:
    """Test cases for Authenticator class."""

    @patch('src.confluence_session.auth.load_dotenv')
    def test_init_loads_dotenv(self, mock_load_dotenv):
        Authenticator()
        mock_load_dotenv.assert_called_once()

    @patch('src.confluence_session.auth.load_dotenv')
    def test_get_credentials_success(self, mock_load_dotenv):
        with patch.dict('os.environ', ENV, clear=True):
            creds = Authenticator().get_credentials()

        assert creds == Credentials(
            url='https://wiki.example.com',
            user='builder',
            api_token='secret-token',
        )

    @pytest.mark.parametrize("missing", list(ENV))
    @patch('src.confluence_session.auth.load_dotenv')
    def test_missing_variable_raises(self, mock_load_dotenv, missing):
        env = {key: value for key, value in ENV.items() if key != missing}
        with patch.dict('os.environ', env, clear=True):
            with pytest.raises(InvalidCredentialsError):
                Authenticator().get_credentials()

    @patch('src.confluence_session.auth.load_dotenv')
    def test_error_does_not_leak_token(self, mock_load_dotenv):
        env = {'CONFLUENCE_USER': 'builder', 'CONFLUENCE_API_TOKEN': 'secret-token'}
        with patch.dict('os.environ', env, clear=True):
            with pytest.raises(InvalidCredentialsError) as exc_info:
                Authenticator().get_credentials()

        assert 'secret-token' not in str(exc_info.value)
        assert exc_info.value.endpoint == 'unknown'

    @patch('src.confluence_session.auth.load_dotenv')
    def test_error_names_each_missing_variable(self, mock_load_dotenv):
        env = {'CONFLUENCE_USER': 'builder'}
        with patch.dict('os.environ', env, clear=True):
            with pytest.raises(InvalidCredentialsError) as exc_info:
                Authenticator().get_credentials()

        assert exc_info.value.missing == ['CONFLUENCE_URL', 'CONFLUENCE_API_TOKEN']
        assert 'CONFLUENCE_URL, CONFLUENCE_API_TOKEN' in str(exc_info.value)
        assert exc_info.value.user == 'builder'

    @patch('src.confluence_session.auth.load_dotenv')
    def test_empty_variable_counts_as_missing(self, mock_load_dotenv):
        env = dict(ENV, CONFLUENCE_API_TOKEN='')
        with patch.dict('os.environ', env, clear=True):
            with pytest.raises(InvalidCredentialsError) as exc_info:
                Authenticator().get_credentials()

        assert exc_info.value.missing == ['CONFLUENCE_API_TOKEN']
