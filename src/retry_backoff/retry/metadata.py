"""
Retry metadata tracking.

This module defines the RetryMetadata dataclass that summarises one
execution of the retry engine for logging and for the exhaustion error.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RetryMetadata:
    """
    Attempt history of a single execution.

    Attributes:
        total_attempts: Number of times the operation was invoked
        delays_ms: Every delay actually waited, in order (one fewer than
            total_attempts when retries ran to exhaustion)
        total_latency_ms: Time from first attempt to final result (ms)
    """

    total_attempts: int
    delays_ms: tuple[float, ...] = field(default_factory=tuple)
    total_latency_ms: int = 0

    def __post_init__(self) -> None:
        """Validate metadata invariants."""
        if self.total_attempts < 1:
            raise ValueError("total_attempts must be >= 1")

        if len(self.delays_ms) >= self.total_attempts:
            raise ValueError("delays_ms must have fewer entries than total_attempts")

        if self.total_latency_ms < 0:
            raise ValueError("total_latency_ms must be >= 0")

    @property
    def total_delay_ms(self) -> float:
        """Sum of all delays waited."""
        return sum(self.delays_ms)
