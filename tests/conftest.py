"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import pytest

from retry_backoff.config import Settings
from retry_backoff.retry.defaults import RetryDefaults
from retry_backoff.retry.strategies import linear_backoff


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.
    
    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.RETRY_MAX_ATTEMPTS = 3
    """
    return Settings(
        APP_NAME="retry-backoff (Test)",
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        RETRY_MAX_ATTEMPTS=10,
        RETRY_INIT_DELAY_MS=1000.0,
        RETRY_BACKOFF_EXPONENT=2.0,
        RETRY_BACKOFF_MAX_DELAY_MS=None,
    )


@pytest.fixture
def fast_defaults(test_settings: Settings) -> RetryDefaults:
    """Isolated defaults store with 1 ms initial delay growing by 1 ms.
    
    Never touches the process-wide DEFAULTS.
    """
    defaults = RetryDefaults(settings=test_settings)
    defaults.override(init_delay=1, get_next_delay=linear_backoff(1))
    return defaults
