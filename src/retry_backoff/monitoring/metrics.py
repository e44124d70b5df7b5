"""Prometheus metrics for the retry engine.

All metrics live in the default prometheus_client registry. Alert rules
worth configuring:
- retry_exhausted_total (operations giving up)
- retry_attempts_total{outcome="retry"} (high retry rate indicates an
  unstable dependency)
"""

from prometheus_client import Counter, Histogram

# === Attempt Metrics ===

retry_attempts_total = Counter(
    "retry_attempts_total",
    "Total operation attempts by outcome",
    ["outcome"],
)
"""
Attempts counter by outcome.

Labels:
- outcome: success (operation returned), retry (operation signalled
  failure), error (operation raised an unrelated error)
"""

retry_exhausted_total = Counter(
    "retry_exhausted_total",
    "Total executions that exhausted their attempt budget",
)
"""
Exhaustion counter, incremented once per AttemptCountExceededError.

Alert thresholds:
- WARN: any sustained increase
"""

# === Delay Metrics ===

retry_delay_milliseconds = Histogram(
    "retry_delay_milliseconds",
    "Delay waited between attempts in milliseconds",
    buckets=[10, 50, 100, 250, 500, 1000, 2500, 5000, 10000, 30000, 60000],
)
"""
Backoff delay histogram, one observation per granted retry.

Buckets span typical backoff sequences (10 ms to 60 s).
"""
