"""
Strategy settings.

Settings are resolved once, when the package is imported, so every request in
the process sees the same idempotency key behavior.
"""

import os
from dataclasses import dataclass

_DISABLED_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool = True) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() not in _DISABLED_VALUES


@dataclass(frozen=True)
class StrategySettings:
    """
    Settings shared by key derivation and the HTTP clients.

    Attributes:
        generate_idempotency_keys: Generate random keys for Retry and
            ExponentialBackoff strategies (default: True)
        idempotency_header: Request header carrying the idempotency key
        should_retry_header: Response header carrying the remote retry hint
    """

    generate_idempotency_keys: bool = True
    idempotency_header: str = "Idempotency-Key"
    should_retry_header: str = "Stripe-Should-Retry"

    @classmethod
    def from_env(cls) -> "StrategySettings":
        """Build settings from REQUEST_STRATEGY_* environment variables."""
        return cls(generate_idempotency_keys=_env_flag("REQUEST_STRATEGY_IDEMPOTENCY_KEYS"))

    @classmethod
    def without_keys(cls) -> "StrategySettings":
        """Preset for the reduced mode where no keys are generated."""
        return cls(generate_idempotency_keys=False)


DEFAULT_SETTINGS = StrategySettings.from_env()
