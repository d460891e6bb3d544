"""
Sync and async HTTP clients that run the attempt loop for a request strategy.

Both clients derive the idempotency key once, before the first attempt, and
send it unchanged with every attempt of the same logical request.
"""

import asyncio
import time

import httpx

from .base import AttemptState, BaseRequestClient
from ..strategy import Continue, Once, RequestStrategy, decide, derive_key


class RequestClient(BaseRequestClient):
    """
    Synchronous client built on httpx.Client.

    Example:
        client = RequestClient("https://api.example.com", api_key="sk_test")
        client.post("/v1/charges", json={...}, strategy=ExponentialBackoff(3))
    """

    def request(
        self,
        method: str,
        path: str,
        *,
        strategy: RequestStrategy | None = None,
        json: dict | None = None,
        params: dict | None = None,
        headers: dict | None = None,
    ) -> httpx.Response:
        """
        Send a request, retrying as the strategy allows.

        Args:
            method: HTTP method
            path: Path relative to base_url
            strategy: Retry strategy (default: Once())
            json: Optional JSON body
            params: Optional query parameters
            headers: Optional extra headers

        Returns:
            The first successful response

        Raises:
            RequestError: When the strategy stops before a successful response
        """
        strategy = strategy or Once()
        idempotency_key = derive_key(strategy, self.settings)
        request_headers = self._get_headers(idempotency_key, headers)
        state = AttemptState()

        with httpx.Client(timeout=self.timeout) as client:
            while True:
                outcome = decide(strategy, state.status, state.should_retry, state.attempt)
                if not isinstance(outcome, Continue):
                    break

                self._log_retry(method, path, state, outcome.delay)
                if outcome.delay:
                    time.sleep(outcome.delay)

                try:
                    response = client.request(
                        method,
                        self._url(path),
                        headers=request_headers,
                        json=json,
                        params=params,
                    )
                except httpx.TransportError as e:
                    state.record_exception(self._transport_error(e))
                    continue

                if response.is_success:
                    return response
                state.record_response(response, self._should_retry_hint(response))

        self._give_up(method, path, state, idempotency_key)

    def get(self, path: str, **kwargs) -> httpx.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> httpx.Response:
        return self.request("POST", path, **kwargs)

    def delete(self, path: str, **kwargs) -> httpx.Response:
        return self.request("DELETE", path, **kwargs)


class AsyncRequestClient(BaseRequestClient):
    """Asynchronous client built on httpx.AsyncClient."""

    async def request(
        self,
        method: str,
        path: str,
        *,
        strategy: RequestStrategy | None = None,
        json: dict | None = None,
        params: dict | None = None,
        headers: dict | None = None,
    ) -> httpx.Response:
        """Send a request, retrying as the strategy allows. See RequestClient.request."""
        strategy = strategy or Once()
        idempotency_key = derive_key(strategy, self.settings)
        request_headers = self._get_headers(idempotency_key, headers)
        state = AttemptState()

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            while True:
                outcome = decide(strategy, state.status, state.should_retry, state.attempt)
                if not isinstance(outcome, Continue):
                    break

                self._log_retry(method, path, state, outcome.delay)
                if outcome.delay:
                    await asyncio.sleep(outcome.delay)

                try:
                    response = await client.request(
                        method,
                        self._url(path),
                        headers=request_headers,
                        json=json,
                        params=params,
                    )
                except httpx.TransportError as e:
                    state.record_exception(self._transport_error(e))
                    continue

                if response.is_success:
                    return response
                state.record_response(response, self._should_retry_hint(response))

        self._give_up(method, path, state, idempotency_key)

    async def get(self, path: str, **kwargs) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs) -> httpx.Response:
        return await self.request("POST", path, **kwargs)

    async def delete(self, path: str, **kwargs) -> httpx.Response:
        return await self.request("DELETE", path, **kwargs)
