"""
HTTP clients driven by a request strategy.
"""

from .base import AttemptState, BaseRequestClient, parse_should_retry
from .http import AsyncRequestClient, RequestClient

__all__ = [
    "AttemptState",
    "BaseRequestClient",
    "parse_should_retry",
    "AsyncRequestClient",
    "RequestClient",
]
