"""
Idempotency key derivation.
"""

import uuid
from typing import assert_never

from .config import DEFAULT_SETTINGS, StrategySettings
from .policy import ExponentialBackoff, Idempotent, Once, RequestStrategy, Retry


def key_generation_enabled(settings: StrategySettings | None = None) -> bool:
    """Check whether Retry and ExponentialBackoff strategies get a generated key."""
    return (settings or DEFAULT_SETTINGS).generate_idempotency_keys


def derive_key(
    strategy: RequestStrategy,
    settings: StrategySettings | None = None,
) -> str | None:
    """
    Derive the idempotency key for a logical request.

    Call this once per request and send the same key with every attempt.
    Calling it again for a retry produces a new key and defeats deduplication.

    Args:
        strategy: Strategy chosen for the request
        settings: Settings to use (default: DEFAULT_SETTINGS)

    Returns:
        The key, or None when the strategy carries no key
    """
    if isinstance(strategy, Once):
        return None
    if isinstance(strategy, Idempotent):
        return strategy.key
    if isinstance(strategy, (Retry, ExponentialBackoff)):
        if not key_generation_enabled(settings):
            return None
        return str(uuid.uuid4())
    assert_never(strategy)
