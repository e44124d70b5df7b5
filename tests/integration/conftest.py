"""Integration test fixtures.

Integration tests wait on real asyncio timers, so delays are kept to a
few milliseconds.
"""

import pytest

from retry_backoff.retry.defaults import RetryDefaults
from retry_backoff.retry.engine import RetryEngine


@pytest.fixture
def real_engine(fast_defaults: RetryDefaults) -> RetryEngine:
    """RetryEngine with isolated 1 ms defaults and the real sleep."""
    return RetryEngine(defaults=fast_defaults)
