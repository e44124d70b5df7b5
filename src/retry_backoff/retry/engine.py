"""
Retry engine.

This module implements the RetryEngine that repeatedly invokes an
operation until it succeeds or the attempt budget is used up, waiting a
backoff-computed delay between attempts.

Outcomes of a single attempt:
    1. Success: the operation returned without signalling failure
    2. Signalled failure: the operation called its FailureSignal; the
       engine waits and retries, or raises AttemptCountExceededError once
       max_attempts invocations have failed
    3. Unrelated error: the operation raised; the error is re-raised
       unchanged and never retried

Observer policy: an exception raised by on_fail or on_success ends the
execution and propagates to the caller unchanged.

Usage:
    engine = RetryEngine()
    result = await engine.execute(fetch, RetryOptions(max_attempts=5))
"""

import asyncio
import inspect
import time
import uuid
from typing import Any, Awaitable, Callable, Optional

import structlog

from retry_backoff.models.options import RetryOptions
from retry_backoff.monitoring.metrics import (
    retry_attempts_total,
    retry_delay_milliseconds,
    retry_exhausted_total,
)
from retry_backoff.retry.defaults import DEFAULTS, RetryDefaults
from retry_backoff.retry.exceptions import AttemptCountExceededError
from retry_backoff.retry.metadata import RetryMetadata
from retry_backoff.retry.outcome import FailureSignal, Succeeded

logger = structlog.get_logger(__name__)

# operation(retry, attempt) -> value or awaitable value
Operation = Callable[[FailureSignal, int], Any]
SleepFunction = Callable[[float], Awaitable[None]]


async def sleep(ms: float) -> None:
    """
    Suspend the current task for a number of milliseconds.

    Example:
        >>> await sleep(100)
    """
    await asyncio.sleep(ms / 1000)


class RetryEngine:
    """
    Executes an operation with retries and backoff.

    The engine holds no per-execution state, so one instance can serve
    concurrent executions.

    Attributes:
        defaults: Store the call options are resolved against
        sleep_fn: Wait capability used between attempts
    """

    def __init__(
        self,
        defaults: Optional[RetryDefaults] = None,
        sleep_fn: Optional[SleepFunction] = None,
    ):
        """
        Initialize retry engine.

        Args:
            defaults: Default options store (process-wide DEFAULTS if None)
            sleep_fn: Async wait taking milliseconds (module sleep if None)
        """
        self.defaults = defaults if defaults is not None else DEFAULTS
        self.sleep_fn = sleep_fn if sleep_fn is not None else sleep

    async def execute(
        self,
        operation: Operation,
        options: Optional[RetryOptions] = None,
        **fields: Any,
    ) -> Any:
        """
        Invoke ``operation`` until it succeeds or attempts run out.

        The operation is called as ``operation(retry, attempt)`` with
        ``attempt`` starting at 0. It may be sync or async.

        Args:
            operation: Callable to retry
            options: Call options; unset fields come from the defaults
            **fields: RetryOptions fields, winning over ``options``

        Returns:
            The value returned by the first successful attempt

        Raises:
            AttemptCountExceededError: Every allowed attempt signalled failure
            Exception: Any error raised by the operation, unchanged
        """
        resolved = self.defaults.resolve(options, **fields)

        # Tag every event of this execution, including those logged by the operation
        with structlog.contextvars.bound_contextvars(retry_execution_id=uuid.uuid4().hex):
            return await self._run(operation, resolved)

    async def _run(self, operation: Operation, resolved: RetryOptions) -> Any:
        """Attempt loop over fully resolved options."""
        max_attempts = resolved.max_attempts
        get_next_delay = resolved.get_next_delay
        delay = resolved.init_delay

        start_time_ms = int(time.time() * 1000)
        delays: list[float] = []
        last_cause: Any = None
        attempt = 0

        while True:
            signal = FailureSignal()
            logger.debug(
                "Starting attempt",
                extra={"attempt": attempt, "max_attempts": max_attempts},
            )

            try:
                value = operation(signal, attempt)
                if inspect.isawaitable(value):
                    value = await value
            except Exception as e:
                retry_attempts_total.labels(outcome="error").inc()
                logger.error(
                    "Operation raised, not retrying",
                    extra={
                        "attempt": attempt,
                        "error_type": type(e).__name__,
                        "error": str(e),
                        "retry_signalled": signal.requested,
                    },
                )
                await self._notify("on_fail", resolved.on_fail, e, attempt)
                raise

            outcome = signal.outcome(value)

            if isinstance(outcome, Succeeded):
                retry_attempts_total.labels(outcome="success").inc()
                logger.info(
                    "Operation succeeded",
                    extra={
                        "attempt": attempt,
                        "total_attempts": attempt + 1,
                        "total_delay_ms": sum(delays),
                        "total_latency_ms": int(time.time() * 1000) - start_time_ms,
                    },
                )
                await self._notify("on_success", resolved.on_success, outcome.value, attempt)
                return outcome.value

            # Signalled failure
            retry_attempts_total.labels(outcome="retry").inc()
            last_cause = outcome.cause
            logger.warning(
                f"Attempt {attempt} failed",
                extra={
                    "attempt": attempt,
                    "max_attempts": max_attempts,
                    "code": outcome.code,
                    "cause_type": type(last_cause).__name__ if last_cause is not None else None,
                },
            )
            await self._notify("on_fail", resolved.on_fail, last_cause, attempt)

            if attempt + 1 >= max_attempts:
                break

            attempt += 1
            delay = get_next_delay(delay, attempt)
            delays.append(delay)
            retry_delay_milliseconds.observe(delay)

            logger.info(
                "Waiting",
                extra={"delay_ms": delay, "next_attempt": attempt},
            )
            await self.sleep_fn(delay)

        retry_metadata = RetryMetadata(
            total_attempts=attempt + 1,
            delays_ms=tuple(delays),
            total_latency_ms=max(int(time.time() * 1000) - start_time_ms, 0),
        )
        retry_exhausted_total.inc()

        logger.error(
            "Maximum attempt count exceeded",
            extra={
                "total_attempts": retry_metadata.total_attempts,
                "total_delay_ms": retry_metadata.total_delay_ms,
                "total_latency_ms": retry_metadata.total_latency_ms,
                "final_cause_type": type(last_cause).__name__ if last_cause is not None else None,
            },
        )

        error = AttemptCountExceededError(cause=last_cause, retry_metadata=retry_metadata)
        if isinstance(last_cause, BaseException):
            raise error from last_cause
        raise error

    async def _notify(
        self,
        name: str,
        observer: Optional[Callable[[Any, int], Any]],
        payload: Any,
        attempt: int,
    ) -> None:
        """Call an observer, awaiting it if it is async."""
        if observer is None:
            return
        try:
            result = observer(payload, attempt)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.error(
                f"Observer {name} raised",
                extra={"attempt": attempt, "error_type": type(e).__name__, "error": str(e)},
            )
            raise


async def do_with_retry(
    operation: Operation,
    options: Optional[RetryOptions] = None,
    **fields: Any,
) -> Any:
    """
    Execute ``operation`` with retries using the process-wide defaults.

    Example:
        >>> result = await do_with_retry(fetch, max_attempts=5)
    """
    return await RetryEngine().execute(operation, options, **fields)
