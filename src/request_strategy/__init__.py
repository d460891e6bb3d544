"""
Request Strategy - retry decisions and idempotency keys for HTTP requests.

Pick a strategy per logical request, derive its idempotency key once, and ask
`decide` after every attempt whether to stop or try again.
"""

from .strategy import (
    BASE_DELAY,
    DEFAULT_SETTINGS,
    Continue,
    ExponentialBackoff,
    Idempotent,
    Once,
    Outcome,
    RequestStrategy,
    Retry,
    Stop,
    StrategySettings,
    calculate_backoff,
    decide,
    derive_key,
    is_client_error,
    key_generation_enabled,
)
from .exceptions import (
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
from .clients import AsyncRequestClient, RequestClient

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Strategies
    "RequestStrategy",
    "Once",
    "Idempotent",
    "Retry",
    "ExponentialBackoff",
    # Decisions
    "Outcome",
    "Stop",
    "Continue",
    "decide",
    "is_client_error",
    "BASE_DELAY",
    "calculate_backoff",
    # Keys
    "derive_key",
    "key_generation_enabled",
    "StrategySettings",
    "DEFAULT_SETTINGS",
    # Exceptions
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
    # Clients
    "RequestClient",
    "AsyncRequestClient",
]
