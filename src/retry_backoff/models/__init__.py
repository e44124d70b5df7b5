"""
Data models for retry-backoff.

RetryOptions is the per-call configuration accepted by the retry engine
and the shape of the process-wide defaults.
"""

from retry_backoff.models.options import FailureObserver, RetryOptions, SuccessObserver

__all__ = [
    "RetryOptions",
    "FailureObserver",
    "SuccessObserver",
]
