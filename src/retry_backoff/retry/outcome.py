"""
Attempt outcomes and the failure signal handed to operations.

An attempt ends in one of two tagged outcomes, ``Succeeded(value)`` or
``RetryRequested(cause)``. The operation asks for a retry by calling the
FailureSignal it receives as its first argument:

    >>> async def fetch(retry, attempt):
    ...     try:
    ...         return await client.get(url)
    ...     except ConnectionError as exc:
    ...         return retry(exc)

Calling the signal marks the attempt as failed no matter what the
operation returns afterwards. Exceptions are never used for this, so an
exception escaping the operation always means it broke, even when the
signal was already called during that attempt: the raised error is
re-raised and the attempt is not retried. Always ``return retry(...)``
so that nothing runs after the signal.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from retry_backoff.retry.exceptions import ATTEMPT_FAILED_ERROR

T = TypeVar("T")


@dataclass(frozen=True)
class Succeeded(Generic[T]):
    """The operation completed without signalling failure."""

    value: T


@dataclass(frozen=True)
class RetryRequested:
    """The operation signalled failure, optionally with a cause."""

    cause: Any = None
    code: str = ATTEMPT_FAILED_ERROR


Outcome = Union[Succeeded[Any], RetryRequested]


class FailureSignal:
    """
    Per-attempt capability to request a retry.

    A fresh signal is created for every attempt. Calling it more than
    once keeps the last cause.
    """

    def __init__(self):
        self._request: RetryRequested | None = None

    def __call__(self, cause: Any = None) -> RetryRequested:
        self._request = RetryRequested(cause)
        return self._request

    @property
    def requested(self) -> bool:
        return self._request is not None

    def outcome(self, value: Any) -> Outcome:
        """Tag the attempt's result, giving precedence to a signalled failure."""
        if self._request is not None:
            return self._request
        return Succeeded(value)
