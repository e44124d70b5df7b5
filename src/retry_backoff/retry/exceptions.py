"""
Retry engine exceptions.

These exceptions let callers tell the terminal outcomes of a retried
operation apart: exhausting the attempt budget raises
AttemptCountExceededError, while errors raised by the operation itself
are re-raised unchanged and never wrapped. Strategy constructors reject
invalid arguments with BackoffConfigurationError.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from retry_backoff.retry.metadata import RetryMetadata

# Error code attached to a signalled (retryable) attempt failure
ATTEMPT_FAILED_ERROR = "EATTEMPTFAILED"
# Error code attached to the exhaustion error
ATTEMPT_COUNT_EXCEEDED_ERROR = "EATTEMPTCOUNTEXCEEDED"


class RetryBackoffError(Exception):
    """
    Base exception for all retry-backoff errors.

    Errors raised by the retried operation never inherit from this; they
    propagate as the operation raised them.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class BackoffConfigurationError(RetryBackoffError, ValueError):
    """
    Raised when a backoff strategy is constructed with invalid arguments.

    Raised synchronously by the constructor, before any attempt is made.
    """
    pass


class AttemptCountExceededError(RetryBackoffError):
    """
    Raised when an operation signalled failure on every allowed attempt.

    When the last cause is itself an exception it is also chained as
    ``__cause__``.

    Attributes:
        cause: Value passed to the final failure signal (None if none given)
        retry_metadata: Attempt count and delays of the exhausted execution
        code: ATTEMPT_COUNT_EXCEEDED_ERROR
    """

    code = ATTEMPT_COUNT_EXCEEDED_ERROR

    def __init__(self, cause: Any = None, retry_metadata: "RetryMetadata | None" = None) -> None:
        self.cause = cause
        self.retry_metadata = retry_metadata
        details: dict[str, Any] = {"code": self.code, "cause": cause}
        if retry_metadata is not None:
            details["total_attempts"] = retry_metadata.total_attempts
            details["delays_ms"] = list(retry_metadata.delays_ms)
        super().__init__("Maximum attempt count exceeded", details)
