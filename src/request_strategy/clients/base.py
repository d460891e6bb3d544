"""
Base request client.

Holds what the sync and async clients share, most importantly the mapping of
failed responses to exceptions.
"""

import logging

import httpx

from ..exceptions import (
    AuthenticationError,
    ConnectionError,
    IdempotencyError,
    InvalidRequestError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    RequestError,
    ServerError,
    TimeoutError,
)
from ..strategy import DEFAULT_SETTINGS, StrategySettings

logger = logging.getLogger(__name__)


def parse_should_retry(value: str | None) -> bool | None:
    """
    Parse the remote retry hint header.

    Returns:
        True or False for "true"/"false", None for a missing or unknown value
    """
    if value is None:
        return None
    value = value.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    return None


class AttemptState:
    """Signals carried from one attempt of a logical request to the next decision."""

    def __init__(self) -> None:
        self.attempt = 0
        self.status: int | None = None
        self.should_retry: bool | None = None
        self.last_response: httpx.Response | None = None
        self.last_exception: RequestError | None = None

    def record_response(self, response: httpx.Response, should_retry: bool | None) -> None:
        self.status = response.status_code
        self.should_retry = should_retry
        self.last_response = response
        self.last_exception = None
        self.attempt += 1

    def record_exception(self, exc: RequestError) -> None:
        # status and hint of the previous response still apply
        self.last_response = None
        self.last_exception = exc
        self.attempt += 1


class BaseRequestClient:
    """
    Common configuration for strategy-driven HTTP clients.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        settings: StrategySettings | None = None,
        timeout: float = 30.0,
        headers: dict | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Base URL prepended to every request path
            api_key: Optional bearer token
            settings: Key generation and header settings (default: DEFAULT_SETTINGS)
            timeout: Request timeout in seconds
            headers: Extra headers sent with every request
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.settings = settings or DEFAULT_SETTINGS
        self.timeout = timeout
        self.default_headers = dict(headers or {})

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _get_headers(
        self,
        idempotency_key: str | None,
        extra: dict | None = None,
    ) -> dict:
        """Build headers for one attempt, including the idempotency key if any."""
        headers = dict(self.default_headers)
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if extra:
            headers.update(extra)
        if idempotency_key is not None:
            headers[self.settings.idempotency_header] = idempotency_key
        return headers

    def _should_retry_hint(self, response: httpx.Response) -> bool | None:
        return parse_should_retry(response.headers.get(self.settings.should_retry_header))

    def _handle_error(
        self,
        response: httpx.Response,
        idempotency_key: str | None = None,
    ) -> None:
        """Convert a failed response to a domain exception."""
        status_code = response.status_code
        context = {
            "status_code": status_code,
            "request_id": response.headers.get("Request-Id"),
        }
        text = response.text

        if status_code == 401:
            raise AuthenticationError("Invalid API key", **context)
        elif status_code == 403:
            raise PermissionDeniedError(f"Permission denied: {text}", **context)
        elif status_code == 404:
            raise NotFoundError(f"Resource not found: {text}", **context)
        elif status_code == 409:
            raise IdempotencyError(
                f"Idempotency key conflict: {text}",
                idempotency_key=idempotency_key,
                **context,
            )
        elif status_code == 429:
            raise RateLimitError("Rate limit exceeded", **context)
        elif 400 <= status_code < 500:
            raise InvalidRequestError(f"Invalid request: {text}", **context)
        elif status_code >= 500:
            raise ServerError(f"Server error: {text}", **context)
        raise RequestError(f"Unexpected response: {text}", **context)

    def _transport_error(self, exc: httpx.TransportError) -> RequestError:
        if isinstance(exc, httpx.TimeoutException):
            return TimeoutError(f"Request timed out after {self.timeout}s")
        return ConnectionError(f"Failed to connect to {self.base_url}: {exc}")

    def _log_retry(
        self,
        method: str,
        path: str,
        state: AttemptState,
        delay: float | None,
    ) -> None:
        if state.attempt == 0:
            return
        if state.last_exception is not None:
            reason = str(state.last_exception)
        else:
            reason = f"status {state.status}"
        wait = f"in {delay:.1f}s" if delay else "now"
        logger.warning(
            f"{method} {path} failed ({reason}), "
            f"retrying {wait} (attempt {state.attempt + 1})"
        )

    def _give_up(
        self,
        method: str,
        path: str,
        state: AttemptState,
        idempotency_key: str | None,
    ) -> None:
        """Raise the error for the last failed attempt once the strategy stops."""
        if state.attempt == 0:
            raise RequestError(f"{method} {path}: strategy permits no attempts")
        logger.error(f"{method} {path} failed after {state.attempt} attempt(s)")
        if state.last_response is not None:
            self._handle_error(state.last_response, idempotency_key)
        if state.last_exception is not None:
            raise state.last_exception
        raise RuntimeError(f"{method} {path} stopped without a recorded failure")
