"""
Request strategies, retry decisions and idempotency keys.
"""

from .backoff import BASE_DELAY, calculate_backoff
from .config import DEFAULT_SETTINGS, StrategySettings
from .decision import decide, is_client_error
from .keys import derive_key, key_generation_enabled
from .outcome import Continue, Outcome, Stop
from .policy import ExponentialBackoff, Idempotent, Once, RequestStrategy, Retry

__all__ = [
    "BASE_DELAY",
    "calculate_backoff",
    "DEFAULT_SETTINGS",
    "StrategySettings",
    "decide",
    "is_client_error",
    "derive_key",
    "key_generation_enabled",
    "Continue",
    "Outcome",
    "Stop",
    "ExponentialBackoff",
    "Idempotent",
    "Once",
    "RequestStrategy",
    "Retry",
]
