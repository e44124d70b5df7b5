"""
retry-backoff: retry an unreliable operation with declarative backoff.

The operation decides what is retryable by calling the failure signal it
is given; anything it raises surfaces immediately. See retry_backoff.retry
for the engine and the backoff strategies.
"""

from retry_backoff.models.options import RetryOptions
from retry_backoff.retry import (
    ATTEMPT_COUNT_EXCEEDED_ERROR,
    ATTEMPT_FAILED_ERROR,
    DEFAULTS,
    AttemptCountExceededError,
    BackoffConfigurationError,
    BackoffFunction,
    FailureSignal,
    FibonacciBackoff,
    RetryBackoffError,
    RetryDefaults,
    RetryEngine,
    RetryMetadata,
    RetryRequested,
    Succeeded,
    constant_backoff,
    do_with_retry,
    exponential_backoff,
    fibonacci_backoff,
    linear_backoff,
    override_default_options,
    random_backoff,
    sleep,
    upward_decay_backoff,
)

__version__ = "0.1.0"

__all__ = [
    "RetryOptions",
    "RetryEngine",
    "do_with_retry",
    "sleep",
    "DEFAULTS",
    "RetryDefaults",
    "override_default_options",
    "RetryMetadata",
    "FailureSignal",
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
