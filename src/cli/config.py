"""Configuration file loading and validation.

Settings live in an optional YAML file. A missing file means defaults;
a malformed one is an error, since silently ignoring it would send
uploads with the wrong settings.
"""

from typing import Any, Dict

import yaml

from src.confluence_session.service import SUPPORTED_NAMESPACES

from .errors import ConfigError
from .models import SessionConfig


class ConfigLoader:
    """Loads SessionConfig from YAML.

    Config file structure:
        api_namespace: confluence2
        timeout: 60
        content_type: text/html
        comment: "Published by CI"
    """

    DEFAULT_CONFIG_DIR = '.confluence-session'
    DEFAULT_CONFIG_FILE = 'config.yaml'

    @classmethod
    def default_path(cls) -> str:
        return f"{cls.DEFAULT_CONFIG_DIR}/{cls.DEFAULT_CONFIG_FILE}"

    @classmethod
    def load(cls, config_path: str) -> SessionConfig:
        """Load and parse config from a YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            SessionConfig with parsed settings (defaults if file is missing)

        Raises:
            ConfigError: If the file cannot be read or is invalid
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            return SessionConfig()
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}")

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        if config_dict is None:
            return SessionConfig()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Config must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls._parse_config(config_dict)

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> SessionConfig:
        config = SessionConfig()

        namespace = config_dict.get('api_namespace', config.api_namespace)
        if namespace not in SUPPORTED_NAMESPACES:
            raise ConfigError(
                f"must be one of {', '.join(SUPPORTED_NAMESPACES)}, got {namespace!r}",
                'api_namespace'
            )
        config.api_namespace = namespace

        timeout = config_dict.get('timeout', config.timeout)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError(
                f"must be a positive number, got {timeout!r}",
                'timeout'
            )
        config.timeout = timeout

        content_type = config_dict.get('content_type')
        if content_type is not None:
            if not isinstance(content_type, str) or not content_type.strip():
                raise ConfigError("must be a non-empty string", 'content_type')
            config.content_type = content_type.strip()

        comment = config_dict.get('comment', '')
        if comment is None:
            comment = ''
        if not isinstance(comment, str):
            raise ConfigError(
                f"must be a string, got {type(comment).__name__}",
                'comment'
            )
        config.comment = comment

        return config
