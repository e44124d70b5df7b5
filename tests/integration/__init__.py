"""
Integration tests for retry-backoff.

Test the engine end to end against real asyncio timers and the
process-wide default engine entry point.
"""
