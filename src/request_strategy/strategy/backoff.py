"""
Backoff delay calculation.
"""

BASE_DELAY = 1.0  # seconds


def calculate_backoff(attempt: int) -> float:
    """
    Calculate the delay before a given attempt.

    The delay doubles with every attempt: 1s, 2s, 4s, ... There is no jitter
    and no upper bound.

    Args:
        attempt: Zero-based attempt number

    Returns:
        Delay in seconds
    """
    delay = BASE_DELAY
    for _ in range(attempt):
        delay *= 2
    return delay
