"""
Retry options model.

Fields left unset on a RetryOptions instance fall back to the
process-wide defaults when the engine resolves them at call start.
"""

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

# (cause, attempt) -> ignored; may return an awaitable
FailureObserver = Callable[[Any, int], Any]
# (value, attempt) -> ignored; may return an awaitable
SuccessObserver = Callable[[Any, int], Any]


class RetryOptions(BaseModel):
    """
    Options for one execution of the retry engine.

    Immutable once built. Only fields passed explicitly count as set;
    see explicit_fields().
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    max_attempts: Optional[int] = Field(
        default=None,
        ge=1,
        description="Max number of times to invoke the operation",
    )
    init_delay: Optional[float] = Field(
        default=None,
        ge=0.0,
        description="Milliseconds handed to the backoff function on the first retry",
    )
    get_next_delay: Optional[Callable[[float, int], float]] = Field(
        default=None,
        description="Backoff function computing the next delay",
    )
    on_fail: Optional[FailureObserver] = Field(
        default=None,
        description="Called with (cause, attempt) when an attempt fails",
    )
    on_success: Optional[SuccessObserver] = Field(
        default=None,
        description="Called with (value, attempt) when the operation succeeds",
    )

    def explicit_fields(self) -> dict[str, Any]:
        """Return the fields that were passed explicitly, with their values."""
        return {name: getattr(self, name) for name in self.model_fields_set}
