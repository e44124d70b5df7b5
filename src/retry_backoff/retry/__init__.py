"""
Retry engine with pluggable backoff strategies.

An operation is invoked as ``operation(retry, attempt)``. It either
returns a value, calls ``retry(cause)`` to ask for another attempt, or
raises, which ends the execution immediately. Between attempts the engine
waits for a delay computed by a backoff strategy.

Main Components:
    - RetryEngine / do_with_retry: The attempt loop
    - Backoff strategies: constant, linear, exponential, upward decay,
      fibonacci, random
    - RetryDefaults / override_default_options: Process-wide defaults
    - AttemptCountExceededError: Raised when every attempt failed

Usage:
    >>> from retry_backoff.retry import do_with_retry, linear_backoff
    >>> result = await do_with_retry(fetch, max_attempts=5, get_next_delay=linear_backoff(500))
"""

from retry_backoff.retry.defaults import DEFAULTS, RetryDefaults, override_default_options
from retry_backoff.retry.engine import RetryEngine, do_with_retry, sleep
from retry_backoff.retry.exceptions import (
    ATTEMPT_COUNT_EXCEEDED_ERROR,
    ATTEMPT_FAILED_ERROR,
    AttemptCountExceededError,
    BackoffConfigurationError,
    RetryBackoffError,
)
from retry_backoff.retry.metadata import RetryMetadata
from retry_backoff.retry.outcome import FailureSignal, Outcome, RetryRequested, Succeeded
from retry_backoff.retry.strategies import (
    BackoffFunction,
    FibonacciBackoff,
    constant_backoff,
    exponential_backoff,
    fibonacci_backoff,
    linear_backoff,
    random_backoff,
    upward_decay_backoff,
)

__all__ = [
    "RetryEngine",
    "do_with_retry",
    "sleep",
    "DEFAULTS",
    "RetryDefaults",
    "override_default_options",
    "RetryMetadata",
    "FailureSignal",
    "Outcome",
    "RetryRequested",
    "Succeeded",
    "BackoffFunction",
    "FibonacciBackoff",
    "constant_backoff",
    "linear_backoff",
    "exponential_backoff",
    "upward_decay_backoff",
    "fibonacci_backoff",
    "random_backoff",
    "RetryBackoffError",
    "AttemptCountExceededError",
    "BackoffConfigurationError",
    "ATTEMPT_FAILED_ERROR",
    "ATTEMPT_COUNT_EXCEEDED_ERROR",
]
