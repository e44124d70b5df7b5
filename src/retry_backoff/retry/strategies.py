"""
Backoff strategies for computing the delay between attempts.

Every strategy is a callable ``(current_delay, attempt) -> next_delay``
where ``attempt`` is the number of the retry about to be made (1 on the
first retry). Delays are in milliseconds.

Strategy Family:
    - constant_backoff: Same delay on every retry
    - linear_backoff: Delay grows by a fixed increment
    - exponential_backoff: Delay grows by a fixed multiplier (the default)
    - upward_decay_backoff: Delay approaches a ceiling asymptotically
    - fibonacci_backoff: Delay follows the Fibonacci sequence (stateful)
    - random_backoff: Delay drawn uniformly from a range

Linear and exponential pass the initial delay through unchanged on the
first retry. Upward decay, fibonacci and random ignore ``current_delay``
(and therefore the configured initial delay) entirely.
"""

import math
import random
from typing import Optional, Protocol

from retry_backoff.retry.exceptions import BackoffConfigurationError


class BackoffFunction(Protocol):
    """
    Protocol for backoff strategies.

    The retry engine calls the strategy once per granted retry, never
    after the final attempt, and waits for the returned number of
    milliseconds.
    """

    def __call__(self, current_delay: float, attempt: int) -> float:
        """
        Compute the next delay.

        Args:
            current_delay: Delay used before the previous retry (or the
                initial delay on the first retry)
            attempt: Retry number, 1 on the first retry

        Returns:
            Milliseconds to wait before the next attempt
        """
        ...


def constant_backoff(delay: Optional[float] = None) -> BackoffFunction:
    """Delay is the same on every retry.

    Without an explicit ``delay`` the current delay is echoed back, so the
    configured initial delay is used for every retry.
    """

    def backoff(current_delay: float, attempt: int) -> float:
        return delay if delay is not None else current_delay

    return backoff


def linear_backoff(increment: float, max_delay: float = math.inf) -> BackoffFunction:
    """
    Delay increases linearly.

    Args:
        increment: Amount added on every retry after the first (slope)
        max_delay: Optional ceiling
    """

    def backoff(current_delay: float, attempt: int) -> float:
        if attempt == 1:
            return current_delay
        return min(current_delay + increment, max_delay)

    return backoff


def exponential_backoff(exponent: float = 2, max_delay: float = math.inf) -> BackoffFunction:
    """
    Delay increases exponentially.

    Args:
        exponent: Multiplier applied on every retry after the first
        max_delay: Optional ceiling
    """

    def backoff(current_delay: float, attempt: int) -> float:
        if attempt == 1:
            return current_delay
        return min(current_delay * exponent, max_delay)

    return backoff


def upward_decay_backoff(max_delay: float, rate: float = 2) -> BackoffFunction:
    """
    Delay rises quickly at first, then approaches ``max_delay``.

    Computes ``max_delay * (1 - rate ** -attempt)`` rounded half up, so
    with the default rate of 2 the sequence for a 1000 ms ceiling is
    500, 750, 875, 938, 969, ...

    Args:
        max_delay: Ceiling the delay converges to
        rate: Decay base, must be greater than 1

    Raises:
        BackoffConfigurationError: If rate <= 1
    """
    if rate <= 1:
        raise BackoffConfigurationError(
            "rate must be greater than 1",
            {"rate": rate, "max_delay": max_delay},
        )

    def backoff(current_delay: float, attempt: int) -> float:
        return math.floor(max_delay * (1 - rate ** -attempt) + 0.5)

    return backoff


class FibonacciBackoff:
    """
    Delay follows the Fibonacci sequence scaled by ``factor``.

    Each call advances the sequence one step, regardless of the arguments,
    so with the default factor the delays are 1000, 2000, 3000, 5000,
    8000, ... An instance carries its position between calls: sharing one
    instance across independent retry sessions continues the sequence
    where the previous session left off. Create one per session, or call
    reset() before reuse.

    Attributes:
        factor: Multiplier applied to the Fibonacci number
        max_delay: Ceiling for the returned delay
    """

    def __init__(self, factor: float = 1000, max_delay: float = math.inf):
        self.factor = factor
        self.max_delay = max_delay
        self._prev = 0
        self._curr = 1

    def __call__(self, current_delay: float, attempt: int) -> float:
        self._prev, self._curr = self._curr, self._prev + self._curr
        return min(self.factor * self._curr, self.max_delay)

    def reset(self) -> None:
        """Rewind the sequence to its start."""
        self._prev = 0
        self._curr = 1


def fibonacci_backoff(factor: float = 1000, max_delay: float = math.inf) -> FibonacciBackoff:
    """Create a new FibonacciBackoff; use ``factor=1000`` for whole seconds."""
    return FibonacciBackoff(factor, max_delay)


def random_backoff(
    min_delay: float,
    max_delay: float,
    rng: Optional[random.Random] = None,
) -> BackoffFunction:
    """
    Delay is random in ``[min_delay, max_delay)``, in whole-millisecond steps.

    Args:
        min_delay: Smallest delay (inclusive)
        max_delay: Largest delay (exclusive)
        rng: Random source, defaults to the ``random`` module

    Raises:
        BackoffConfigurationError: If max_delay <= min_delay
    """
    if max_delay <= min_delay:
        raise BackoffConfigurationError(
            "min_delay must be less than max_delay",
            {"min_delay": min_delay, "max_delay": max_delay},
        )
    source = rng if rng is not None else random

    def backoff(current_delay: float, attempt: int) -> float:
        return min_delay + math.floor(source.random() * (max_delay - min_delay))

    return backoff
