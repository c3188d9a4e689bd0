"""
Client configuration.

Provides the lob.com credential, configuration exceptions and logging setup.
"""

from .settings import LobConfig, load_config, BASE_API, API_VERSION
from .exceptions import (
    ConfigException,
    ApiKeyRequiredException,
    ConfigFileNotFoundException,
    InvalidConfigFileException
)
from .logging import bootstrap_logging, log_stack_trace

__all__ = [
    'LobConfig',
    'load_config',
    'BASE_API',
    'API_VERSION',
    'ConfigException',
    'ApiKeyRequiredException',
    'ConfigFileNotFoundException',
    'InvalidConfigFileException',
    'bootstrap_logging',
    'log_stack_trace'
]
