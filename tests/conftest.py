"""
Root pytest configuration for lob-client.
"""

import pytest

# Auto-bootstrap logging for all tests
from lob_client.config.logging import bootstrap_logging
bootstrap_logging()


LOB_ENV_VARS = ('LOB_API_KEY', 'LOB_BASE_API', 'LOB_API_VERSION')


@pytest.fixture(autouse=True)
def clean_lob_env(monkeypatch):
    """Keep a developer's real LOB_* variables out of the tests."""
    for var_name in LOB_ENV_VARS:
        monkeypatch.delenv(var_name, raising=False)
