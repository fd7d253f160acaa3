"""HTTP client utility for ScalePad API communication.

This module provides the request executor used by every resource. Each
physical attempt builds the headers, races the transport call against the
per-attempt timeout (and an optional external cancellation signal), and
turns the outcome into parsed JSON or a typed request error. Whole requests
are wrapped in the retry engine.
"""

import asyncio
import json
from typing import Any, Dict, Optional, Sequence, Tuple

import httpx

from ..errors import NetworkError, TimeoutError
from ..models.config import RetryConfig
from ..services.logger import Logger
from .http_error_handler import classify, classify_transport_error, read_error_body
from .retry import with_retry

QueryParams = Sequence[Tuple[str, str]]

API_KEY_HEADER = "x-api-key"


class HttpClient:
    """HTTP client for ScalePad API communication.

    Owns one ``httpx.AsyncClient`` (created lazily, released by ``close``).
    ``request`` performs a whole retried request; ``_execute_request``
    performs exactly one attempt.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout_ms: int,
        retry: RetryConfig,
        logger: Logger,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize HTTP client.

        Args:
            api_key: API key sent with every request
            base_url: API base URL
            timeout_ms: Per-attempt timeout in milliseconds
            retry: Retry policy shared by all requests
            logger: Logger for request diagnostics
            transport: Optional custom httpx transport

        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_ms = timeout_ms
        self.retry = retry
        self.logger = logger
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    def _initialize_client(self) -> httpx.AsyncClient:
        """Initialize HTTP client if not already initialized."""
        if self.client is None:
            self.client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout_ms / 1000,
                transport=self.transport,
            )
        return self.client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self.client:
            try:
                await self.client.aclose()
            finally:
                self.client = None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def build_headers(
        self, headers: Optional[Dict[str, str]] = None, has_body: bool = False
    ) -> Dict[str, str]:
        """Build request headers.

        Caller headers override the defaults, matching names case-insensitively.
        ``content-type`` is added only when a body is sent and the caller did
        not supply one.

        Args:
            headers: Caller-supplied headers (optional)
            has_body: Whether the request carries a body

        Returns:
            Headers dictionary

        """
        caller = headers or {}
        caller_names = {key.lower() for key in caller}
        defaults = {"accept": "application/json", API_KEY_HEADER: self.api_key}
        if has_body:
            defaults["content-type"] = "application/json"

        merged: Dict[str, str] = {
            key: value for key, value in defaults.items() if key not in caller_names
        }
        merged.update(caller)
        return merged

    async def _send(
        self, request: httpx.Request, cancel_event: Optional[asyncio.Event]
    ) -> httpx.Response:
        """Send one request, racing it against the timeout and cancel signal."""
        client = self._initialize_client()
        send_task = asyncio.ensure_future(client.send(request))
        waiters = {send_task}
        cancel_task: Optional[asyncio.Future] = None
        if cancel_event is not None:
            cancel_task = asyncio.ensure_future(cancel_event.wait())
            waiters.add(cancel_task)

        try:
            done, _ = await asyncio.wait(
                waiters, timeout=self.timeout_ms / 1000, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            for waiter in waiters:
                if not waiter.done():
                    waiter.cancel()
            # Let cancelled tasks unwind before returning
            await asyncio.gather(*waiters, return_exceptions=True)

        if send_task in done and not send_task.cancelled():
            return send_task.result()
        if cancel_task is not None and cancel_task in done:
            raise NetworkError("Network request failed: request was cancelled")
        raise TimeoutError(self.timeout_ms)

    async def _execute_request(
        self,
        path: str,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        params: Optional[QueryParams] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Any:
        """Execute a single HTTP request attempt.

        Args:
            path: Request path relative to the base URL
            method: HTTP method
            headers: Caller-supplied headers (optional)
            body: JSON-serializable request body (optional)
            params: Query parameter pairs (optional)
            cancel_event: Optional external cancellation signal

        Returns:
            Parsed JSON for 2xx responses, None for empty-success responses

        Raises:
            RequestError: Classified failure (never returns for non-2xx)

        """
        client = self._initialize_client()
        has_body = body is not None
        request = client.build_request(
            method,
            path,
            params=list(params) if params else None,
            headers=self.build_headers(headers, has_body),
            content=json.dumps(body) if has_body else None,
        )
        url = str(request.url)

        self.logger.debug(f"{method} {url}")
        try:
            response = await self._send(request, cancel_event)
        except httpx.HTTPError as e:
            raise classify_transport_error(e, self.timeout_ms) from e

        self.logger.debug(f"{method} {url} -> {response.status_code}")

        if not response.is_success:
            raise classify(
                response.status_code,
                read_error_body(response),
                response.headers.get("retry-after"),
            )

        # 204 No Content
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise NetworkError(
                f"Network request failed: invalid JSON response ({e})", cause=e
            ) from e

    async def request(
        self,
        path: str,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        params: Optional[QueryParams] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Any:
        """Make an HTTP request with timeout and retry logic.

        Args:
            path: Request path relative to the base URL
            method: HTTP method
            headers: Caller-supplied headers (optional)
            body: JSON-serializable request body (optional)
            params: Query parameter pairs (optional)
            cancel_event: Optional external cancellation signal

        Returns:
            Parsed JSON, or None for empty-success responses

        Raises:
            RequestError: Final failure after retries

        """
        return await with_retry(
            lambda: self._execute_request(path, method, headers, body, params, cancel_event),
            self.retry,
            self.logger,
            cancel_event=cancel_event,
        )

    async def get(self, path: str, params: Optional[QueryParams] = None) -> Any:
        """Make GET request."""
        return await self.request(path, "GET", params=params)

    async def post(self, path: str, body: Any = None) -> Any:
        """Make POST request."""
        return await self.request(path, "POST", body=body)

    async def patch(self, path: str, body: Any = None) -> Any:
        """Make PATCH request."""
        return await self.request(path, "PATCH", body=body)

    async def delete(self, path: str) -> Any:
        """Make DELETE request."""
        return await self.request(path, "DELETE")
