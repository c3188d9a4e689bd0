"""
Lob API client package.

Provides the HTTP transport shared by every Lob resource, its error taxonomy and call metrics.
"""

from .base_client import APIClient
from .remote_client import LobClient
from .response import APIResponse
from .metrics import CallMetrics, MetricsBundle, MetricsSink
from .exceptions import (
    LobError,
    RequestConstructionError,
    NetworkError,
    BodyReadError,
    DecodeError,
    APIStatusError
)

__all__ = [
    'APIClient',
    'LobClient',
    'APIResponse',
    'CallMetrics',
    'MetricsBundle',
    'MetricsSink',
    'LobError',
    'RequestConstructionError',
    'NetworkError',
    'BodyReadError',
    'DecodeError',
    'APIStatusError'
]
