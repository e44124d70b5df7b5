"""Monitoring and metrics instrumentation for retry-backoff.

Exports Prometheus metrics updated by the retry engine. Exposing them
(e.g. via prometheus_client.start_http_server) is left to the application.
"""

from retry_backoff.monitoring.metrics import (
    retry_attempts_total,
    retry_delay_milliseconds,
    retry_exhausted_total,
)

__all__ = [
    "retry_attempts_total",
    "retry_exhausted_total",
    "retry_delay_milliseconds",
]
