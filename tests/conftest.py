"""Test configuration and fixtures."""

import logfire
import pytest

from oer.config import StoreSettings

# Keep spans local: no console output and nothing sent to Logfire cloud
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def store_settings() -> StoreSettings:
    """Default store policies."""
    return StoreSettings()
