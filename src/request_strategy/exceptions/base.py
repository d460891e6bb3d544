"""
Base exception classes for HTTP requests driven by a request strategy.

Each exception includes a `retryable` flag indicating whether the failure is
transient. Whether a retry actually happens is decided by the strategy.
"""


class InvalidStrategyError(ValueError):
    """Raised when a request strategy is constructed with invalid arguments."""


class RequestError(Exception):
    """Base exception for all request errors."""

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        status_code: int | None = None,
        request_id: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.retryable = retryable
        self.status_code = status_code
        self.request_id = request_id

    def __str__(self) -> str:
        parts = [self.message]
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        if self.request_id:
            parts.append(f"[request: {self.request_id}]")
        return " ".join(parts)


class InvalidRequestError(RequestError):
    """Raised when the request is malformed. Not retryable."""

    def __init__(self, message: str = "Invalid request", **kwargs):
        super().__init__(message, retryable=False, **kwargs)


class AuthenticationError(RequestError):
    """Raised when authentication fails. Not retryable."""

    def __init__(self, message: str = "Authentication failed", **kwargs):
        super().__init__(message, retryable=False, **kwargs)


class PermissionDeniedError(RequestError):
    """Raised when the credentials lack access to the resource. Not retryable."""

    def __init__(self, message: str = "Permission denied", **kwargs):
        super().__init__(message, retryable=False, **kwargs)


class NotFoundError(RequestError):
    """Raised when the requested resource does not exist. Not retryable."""

    def __init__(self, message: str = "Resource not found", **kwargs):
        super().__init__(message, retryable=False, **kwargs)


class IdempotencyError(RequestError):
    """Raised when an idempotency key is reused with different parameters. Not retryable."""

    def __init__(
        self,
        message: str = "Idempotency key conflict",
        idempotency_key: str | None = None,
        **kwargs,
    ):
        super().__init__(message, retryable=False, **kwargs)
        self.idempotency_key = idempotency_key


class RateLimitError(RequestError):
    """Raised when rate limit is exceeded. Always retryable."""

    def __init__(self, message: str = "Rate limit exceeded", **kwargs):
        super().__init__(message, retryable=True, **kwargs)


class ServerError(RequestError):
    """Raised when the server returns a 5xx error. Usually retryable."""

    def __init__(self, message: str = "Server error", **kwargs):
        super().__init__(message, retryable=True, **kwargs)


class ConnectionError(RequestError):
    """Raised when the connection to the service fails. Usually retryable."""

    def __init__(self, message: str = "Connection failed", **kwargs):
        super().__init__(message, retryable=True, **kwargs)


class TimeoutError(RequestError):
    """Raised when request times out. Usually retryable."""

    def __init__(self, message: str = "Request timed out", **kwargs):
        super().__init__(message, retryable=True, **kwargs)
