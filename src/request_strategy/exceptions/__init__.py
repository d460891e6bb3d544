"""
Exception hierarchy for strategy-driven requests.
"""

from .base import (
    InvalidStrategyError,
    RequestError,
    InvalidRequestError,
    AuthenticationError,
    PermissionDeniedError,
    NotFoundError,
    IdempotencyError,
    RateLimitError,
    ServerError,
    ConnectionError,
    TimeoutError,
)

__all__ = [
    "InvalidStrategyError",
    "RequestError",
    "InvalidRequestError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "IdempotencyError",
    "RateLimitError",
    "ServerError",
    "ConnectionError",
    "TimeoutError",
]
