"""
Request strategies.

A strategy is chosen once per logical request and describes how many times
the request may be attempted and which idempotency key ties the attempts
together.
"""

from dataclasses import dataclass
from typing import Union

from ..exceptions import InvalidStrategyError


def _check_max_attempts(max_attempts: int) -> None:
    # bool is an int subclass but never a sensible attempt budget
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        raise InvalidStrategyError(
            f"max_attempts must be an int, got {type(max_attempts).__name__}"
        )
    if max_attempts < 0:
        raise InvalidStrategyError(f"max_attempts must be >= 0, got {max_attempts}")


@dataclass(frozen=True)
class Once:
    """Run the request a single time, without an idempotency key."""


@dataclass(frozen=True)
class Idempotent:
    """Run the request a single time with a caller-supplied idempotency key."""

    key: str

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise InvalidStrategyError("Idempotent requires a non-empty string key")


@dataclass(frozen=True)
class Retry:
    """
    Retry the request up to `max_attempts` times with no delay.

    All attempts share one randomly generated idempotency key.
    """

    max_attempts: int

    def __post_init__(self) -> None:
        _check_max_attempts(self.max_attempts)


@dataclass(frozen=True)
class ExponentialBackoff:
    """
    Retry the request up to `max_attempts` times, doubling the delay each time.

    All attempts share one randomly generated idempotency key.
    """

    max_attempts: int

    def __post_init__(self) -> None:
        _check_max_attempts(self.max_attempts)


RequestStrategy = Union[Once, Idempotent, Retry, ExponentialBackoff]
