"""
Outcome of a single retry decision.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Stop:
    """No further attempts should be made."""


@dataclass(frozen=True)
class Continue:
    """
    Make another attempt.

    Attributes:
        delay: Seconds to wait before the attempt, or None to go immediately
    """

    delay: float | None = None


Outcome = Union[Stop, Continue]
