"""
Client settings.

Resolves the lob.com credential (API key, base endpoint, protocol version) from
environment variables or a YAML config file. Environment variables win over file values.
"""
import os
import logging
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional, Union

from .exceptions import ApiKeyRequiredException, ConfigFileNotFoundException, InvalidConfigFileException

logger = logging.getLogger(__name__)

# Base URL and API version for Lob.
BASE_API = "https://api.lob.com/v1/"
API_VERSION = "2016-06-30"

# Environment variable -> (config file key, LobConfig attribute)
ENV_VARS = {
    'LOB_API_KEY': ('api-key', 'api_key'),
    'LOB_BASE_API': ('base-api', 'base_api'),
    'LOB_API_VERSION': ('api-version', 'api_version'),
}


def _mask(value: str) -> str:
    """Mask a secret, keeping only a short prefix for identification."""
    if not value:
        return ''
    if len(value) <= 8:
        return '*' * len(value)
    return value[:5] + '*' * (len(value) - 5)


@dataclass(frozen=True)
class LobConfig:
    """Information on how to connect to the lob.com API."""
    api_key: str
    base_api: str = BASE_API
    api_version: str = API_VERSION

    def __post_init__(self):
        if not self.base_api.endswith('/'):
            object.__setattr__(self, 'base_api', self.base_api + '/')

    def __repr__(self):
        return (f"LobConfig(api_key='{_mask(self.api_key)}', base_api='{self.base_api}', "
                f"api_version='{self.api_version}')")

    def to_dict(self, show_secrets: bool = False) -> Dict[str, str]:
        """Return the config as a dict keyed by config file names."""
        return {
            'api-key': self.api_key if show_secrets else _mask(self.api_key),
            'base-api': self.base_api,
            'api-version': self.api_version,
        }

    @classmethod
    def from_env(cls, defaults: Optional[Dict[str, Any]] = None,
                 config_file: Optional[str] = None) -> 'LobConfig':
        """
        Build a config from LOB_* environment variables.

        Args:
            defaults: Values keyed by config file names, used where no env var is set
            config_file: Source of the defaults, only used for error guidance

        Raises:
            ApiKeyRequiredException: If no API key is available from either source
        """
        defaults = defaults or {}
        values = {}
        for var_name, (file_key, attribute) in ENV_VARS.items():
            value = os.environ.get(var_name)
            if value is not None and value.strip():
                logger.debug(f"{attribute} taken from environment variable {var_name}")
                values[attribute] = value.strip()
            elif defaults.get(file_key) is not None:
                values[attribute] = str(defaults[file_key])

        if not values.get('api_key'):
            raise ApiKeyRequiredException(
                "LOB_API_KEY is not set and no api-key was configured",
                config_file=config_file
            )
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'LobConfig':
        """
        Build a config from a YAML file, with LOB_* environment variables taking precedence.

        Raises:
            ConfigFileNotFoundException: If the file does not exist
            InvalidConfigFileException: If the file is not valid YAML or not a mapping
            ApiKeyRequiredException: If no API key is available from either source
        """
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigFileNotFoundException(f"Config file not found: {config_path}",
                                              config_file=str(config_path))
        try:
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfigFileException(f"Invalid YAML: {e}", config_file=str(config_path)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InvalidConfigFileException(
                f"Expected a mapping, found {type(data).__name__}",
                config_file=str(config_path)
            )
        logger.debug(f"Loaded client config from {config_path}")
        return cls.from_env(defaults=data, config_file=str(config_path))


def load_config(config_file: Optional[str] = None) -> LobConfig:
    """Load config from config_file if given, otherwise from the environment."""
    if config_file:
        return LobConfig.from_yaml(config_file)
    return LobConfig.from_env()
