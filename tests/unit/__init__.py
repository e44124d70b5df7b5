"""
Unit tests for retry-backoff.

Test individual components in isolation:
- Backoff strategies (sequences, caps, construction errors)
- Retry engine (attempt counting, exhaustion, unrelated errors, observers)
- Default options store (override, resolve)
- Outcome tagging and failure signal
- Settings and logging configuration
"""
