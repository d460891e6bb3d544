"""
Retry decision for a single logical request.
"""

from typing import assert_never

from .backoff import calculate_backoff
from .outcome import Continue, Outcome, Stop
from .policy import ExponentialBackoff, Idempotent, Once, RequestStrategy, Retry


def is_client_error(status: int | None) -> bool:
    """Check if the status code is in the 4xx range."""
    return status is not None and 400 <= status < 500


def decide(
    strategy: RequestStrategy,
    status: int | None,
    should_retry: bool | None,
    attempt_count: int,
) -> Outcome:
    """
    Decide whether another attempt should be made.

    Args:
        strategy: Strategy chosen for the request
        status: HTTP status of the most recent attempt, None before the first one
        should_retry: Remote retry hint, False when the server advises against retrying
        attempt_count: Number of attempts already made

    Returns:
        Stop, or Continue with an optional delay in seconds
    """
    # the server explicitly said not to retry
    if should_retry is False:
        return Stop()

    if isinstance(strategy, (Once, Idempotent)):
        return Continue() if attempt_count == 0 else Stop()

    # client errors usually mean a bad request, not a transient fault
    if is_client_error(status):
        return Stop()

    if isinstance(strategy, Retry):
        if attempt_count < strategy.max_attempts:
            return Continue()
        return Stop()
    if isinstance(strategy, ExponentialBackoff):
        if attempt_count < strategy.max_attempts:
            return Continue(calculate_backoff(attempt_count))
        return Stop()
    assert_never(strategy)
