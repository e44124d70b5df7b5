"""
Unit tests for attempt outcomes and the failure signal.
"""

from retry_backoff.retry.exceptions import ATTEMPT_FAILED_ERROR
from retry_backoff.retry.outcome import FailureSignal, RetryRequested, Succeeded


def test_failure_signal_not_requested_yields_success():
    """Test an untouched signal tags the value as Succeeded."""
    signal = FailureSignal()

    outcome = signal.outcome("value")

    assert not signal.requested
    assert outcome == Succeeded("value")


def test_failure_signal_request_returns_outcome():
    """Test calling the signal returns and records a RetryRequested."""
    signal = FailureSignal()
    cause = TimeoutError("slow")

    returned = signal(cause)

    assert signal.requested
    assert returned == RetryRequested(cause)
    assert returned.code == ATTEMPT_FAILED_ERROR
    assert signal.outcome("ignored") is returned


def test_failure_signal_without_cause():
    """Test the cause defaults to None."""
    signal = FailureSignal()

    signal()

    assert signal.outcome(None) == RetryRequested(None)


def test_failure_signal_keeps_last_cause():
    """Test calling the signal twice keeps the last cause."""
    signal = FailureSignal()

    signal("first")
    signal("second")

    assert signal.outcome(None).cause == "second"
