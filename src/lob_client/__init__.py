"""
Client library for the lob.com address verification and mailing API.
"""

from .api_client import (
    LobClient,
    APIResponse,
    CallMetrics,
    LobError,
    RequestConstructionError,
    NetworkError,
    BodyReadError,
    DecodeError,
    APIStatusError
)
from .config import LobConfig, BASE_API, API_VERSION
from .forms import LobRecord, Int64, encode_form, UnsupportedFieldTypeError

__version__ = '0.1.0'

__all__ = [
    'LobClient',
    'APIResponse',
    'CallMetrics',
    'LobError',
    'RequestConstructionError',
    'NetworkError',
    'BodyReadError',
    'DecodeError',
    'APIStatusError',
    'LobConfig',
    'BASE_API',
    'API_VERSION',
    'LobRecord',
    'Int64',
    'encode_form',
    'UnsupportedFieldTypeError'
]
