"""
Unit tests for the default options store.

Tests baseline seeding from settings, cumulative overrides and call-time
resolution. Every test uses its own RetryDefaults; the process-wide
DEFAULTS is never mutated.
"""

import pytest
from pydantic import ValidationError

from retry_backoff.config import Settings
from retry_backoff.models.options import RetryOptions
from retry_backoff.retry.defaults import RetryDefaults, override_default_options
from retry_backoff.retry.strategies import constant_backoff, linear_backoff


def test_defaults_baseline_from_settings(test_settings):
    """Test the baseline mirrors settings: 10 attempts, 1000 ms, exponential x2."""
    defaults = RetryDefaults(settings=test_settings)

    options = defaults.options
    assert options.max_attempts == 10
    assert options.init_delay == 1000
    assert options.get_next_delay(1000, 1) == 1000
    assert options.get_next_delay(1000, 2) == 2000
    assert options.on_fail is None
    assert options.on_success is None


def test_defaults_baseline_respects_max_delay():
    """Test RETRY_BACKOFF_MAX_DELAY_MS caps the default strategy."""
    settings = Settings(RETRY_BACKOFF_EXPONENT=10, RETRY_BACKOFF_MAX_DELAY_MS=5000)
    defaults = RetryDefaults(settings=settings)

    assert defaults.options.get_next_delay(1000, 2) == 5000


def test_defaults_constructor_options_applied_over_baseline(test_settings):
    """Test options given to the constructor replace only their fields."""
    defaults = RetryDefaults(RetryOptions(max_attempts=3), settings=test_settings)

    assert defaults.options.max_attempts == 3
    assert defaults.options.init_delay == 1000


def test_override_returns_full_defaults(test_settings):
    """Test override merges given fields and returns the complete set."""
    defaults = RetryDefaults(settings=test_settings)
    backoff = linear_backoff(1)

    result = defaults.override(init_delay=1, get_next_delay=backoff)

    assert result is defaults.options
    assert result.init_delay == 1
    assert result.get_next_delay is backoff
    assert result.max_attempts == 10


def test_override_is_cumulative(test_settings):
    """Test successive overrides build on each other."""
    defaults = RetryDefaults(settings=test_settings)

    defaults.override(max_attempts=4)
    defaults.override(RetryOptions(init_delay=5))

    assert defaults.options.max_attempts == 4
    assert defaults.options.init_delay == 5


def test_override_ignores_none_for_required_fields(test_settings):
    """Test an explicit None never clears max_attempts, init_delay or backoff."""
    defaults = RetryDefaults(settings=test_settings)

    defaults.override(max_attempts=None, init_delay=None, get_next_delay=None)

    assert defaults.options.max_attempts == 10
    assert defaults.options.init_delay == 1000
    assert defaults.options.get_next_delay is not None


def test_override_validates_fields(test_settings):
    """Test invalid values and unknown fields are rejected."""
    defaults = RetryDefaults(settings=test_settings)

    with pytest.raises(ValidationError):
        defaults.override(max_attempts=0)
    with pytest.raises(ValidationError):
        defaults.override(init_delay=-1)
    with pytest.raises(ValidationError):
        defaults.override(max_attempt=3)

    assert defaults.options.max_attempts == 10


def test_resolve_fills_unset_fields(test_settings):
    """Test call options win, unset fields come from the defaults."""
    defaults = RetryDefaults(settings=test_settings)
    defaults.override(init_delay=50)
    backoff = constant_backoff(5)

    resolved = defaults.resolve(RetryOptions(max_attempts=2), get_next_delay=backoff)

    assert resolved.max_attempts == 2
    assert resolved.init_delay == 50
    assert resolved.get_next_delay is backoff
    assert defaults.options.max_attempts == 10


def test_resolve_without_options_returns_defaults(test_settings):
    """Test resolve() with nothing given returns the current defaults."""
    defaults = RetryDefaults(settings=test_settings)

    assert defaults.resolve() is defaults.options


def test_override_default_options_targets_process_defaults(monkeypatch, test_settings):
    """Test the module-level entry point delegates to DEFAULTS."""
    isolated = RetryDefaults(settings=test_settings)
    monkeypatch.setattr("retry_backoff.retry.defaults.DEFAULTS", isolated)

    result = override_default_options(max_attempts=2)

    assert result.max_attempts == 2
    assert isolated.options.max_attempts == 2
