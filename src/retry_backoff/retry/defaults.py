"""
Process-wide default retry options.

DEFAULTS is created once at import, seeded from Settings, and changed
only through override_default_options(). Overrides are cumulative and
cannot be undone. The engine reads the defaults once at the start of each
execution, so an override never affects an execution already running.
Overrides are meant to happen at startup, before concurrent executions
begin.

Code that needs isolated defaults (tests, libraries embedding the engine)
builds its own RetryDefaults and passes it to RetryEngine.
"""

import math
from typing import Any

import structlog

from retry_backoff.config import Settings, settings as global_settings
from retry_backoff.models.options import RetryOptions
from retry_backoff.retry.strategies import exponential_backoff

logger = structlog.get_logger(__name__)

# Fields that always need a value; an explicit None falls back instead
_REQUIRED_FIELDS = ("max_attempts", "init_delay", "get_next_delay")


def _merge(base: RetryOptions, options: RetryOptions | None, fields: dict[str, Any]) -> RetryOptions:
    update: dict[str, Any] = {}
    if options is not None:
        update.update(options.explicit_fields())
    if fields:
        # Validate keyword fields the same way as a RetryOptions argument
        update.update(RetryOptions(**fields).explicit_fields())
    for name in _REQUIRED_FIELDS:
        if name in update and update[name] is None:
            del update[name]
    return base.model_copy(update=update)


class RetryDefaults:
    """
    Mutable store for the default retry options.

    Attributes:
        options: Current defaults, every required field set
    """

    def __init__(self, options: RetryOptions | None = None, settings: Settings | None = None):
        """
        Initialize the store.

        Args:
            options: Fields to apply over the settings-derived baseline
            settings: Settings used for the baseline (global settings if None)
        """
        self._options = _merge(self.baseline(settings or global_settings), options, {})

    @staticmethod
    def baseline(settings: Settings) -> RetryOptions:
        """Build the full default options described by settings."""
        max_delay = settings.RETRY_BACKOFF_MAX_DELAY_MS
        return RetryOptions(
            max_attempts=settings.RETRY_MAX_ATTEMPTS,
            init_delay=settings.RETRY_INIT_DELAY_MS,
            get_next_delay=exponential_backoff(
                settings.RETRY_BACKOFF_EXPONENT,
                max_delay if max_delay is not None else math.inf,
            ),
        )

    @property
    def options(self) -> RetryOptions:
        return self._options

    def override(self, options: RetryOptions | None = None, **fields: Any) -> RetryOptions:
        """
        Merge explicitly set fields into the defaults.

        Fields not given are left untouched. Keyword fields win over the
        same fields on ``options``.

        Returns:
            The resulting full defaults
        """
        self._options = _merge(self._options, options, fields)

        logger.info(
            "Retry defaults overridden",
            extra={
                "fields": sorted(set(options.explicit_fields() if options is not None else {}) | set(fields)),
                "max_attempts": self._options.max_attempts,
                "init_delay": self._options.init_delay,
            },
        )
        return self._options

    def resolve(self, options: RetryOptions | None = None, **fields: Any) -> RetryOptions:
        """Return call options with unset fields filled from the current defaults."""
        if options is None and not fields:
            return self._options
        return _merge(self._options, options, fields)


# Global defaults instance
DEFAULTS = RetryDefaults()


def override_default_options(options: RetryOptions | None = None, **fields: Any) -> RetryOptions:
    """
    Change the process-wide default options.

    Example:
        >>> override_default_options(init_delay=1, get_next_delay=linear_backoff(1))
    """
    return DEFAULTS.override(options, **fields)
