"""Unit test fixtures (mocks and stubs).

Provides an engine whose waits are recorded instead of slept.
"""

import pytest
from unittest.mock import AsyncMock

from retry_backoff.retry.defaults import RetryDefaults
from retry_backoff.retry.engine import RetryEngine


@pytest.fixture
def mock_sleep():
    """Async sleep stub; inspect await_args_list for the delays waited."""
    return AsyncMock(return_value=None)


@pytest.fixture
def engine(fast_defaults: RetryDefaults, mock_sleep: AsyncMock) -> RetryEngine:
    """RetryEngine over isolated defaults that never really sleeps."""
    return RetryEngine(defaults=fast_defaults, sleep_fn=mock_sleep)


@pytest.fixture
def waited(mock_sleep: AsyncMock):
    """Callable returning the delays passed to mock_sleep so far."""
    def _waited() -> list[float]:
        return [call.args[0] for call in mock_sleep.await_args_list]
    
    return _waited
