"""Request dispatcher for the Freshlearn API."""

import asyncio
import contextlib
import json
import time
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from freshlearn_sdk._internal.dispatch.models import (
    API_KEY_HEADER,
    BODY_METHODS,
    JSON_CONTENT_TYPE,
    DispatchRequest,
)
from freshlearn_sdk._internal.dispatch.redaction import redact_payload
from freshlearn_sdk._internal.http import create_async_http_client, create_http_client
from freshlearn_sdk.config import FreshlearnConfig
from freshlearn_sdk.exceptions import FreshlearnValidationError
from freshlearn_sdk.models.response import ApiResponse, RequestOptions


class RequestDispatcher:
    """Single entry point for every Freshlearn API call.

    Builds the request (URL, merged headers, JSON body), sends it and
    classifies the response into an ApiResponse envelope. HTTP-level failures
    (4xx/5xx, unparseable bodies) never raise; they are reported in the
    envelope. Transport failures (connection errors, timeouts) propagate to
    the caller unchanged.
    """

    def __init__(self, config: FreshlearnConfig) -> None:
        """Initialize the dispatcher.

        Args:
            config: Immutable client configuration.
        """
        self._config = config
        self._default_headers: dict[str, str] = {
            API_KEY_HEADER: config.api_key,
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
        }

    @property
    def config(self) -> FreshlearnConfig:
        return self._config

    @property
    def default_headers(self) -> dict[str, str]:
        """Copy of the headers sent with every request."""
        return dict(self._default_headers)

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._config.debug:
            import sys

            print(f"[freshlearn-sdk] {message}", file=sys.stderr)

    # =========================================================================
    # Request Construction
    # =========================================================================

    def build_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        options: RequestOptions | None = None,
    ) -> DispatchRequest:
        """Build the request descriptor for a call.

        Args:
            method: HTTP verb (GET, POST, PUT, DELETE).
            path: Path relative to the base URL, starting with "/".
            body: Optional payload (pydantic model or JSON-serializable value).
                Only sent for POST and PUT.
            options: Optional per-call header overrides and timeout.

        Returns:
            The request descriptor.

        Raises:
            FreshlearnValidationError: If the body cannot be serialized to JSON.
        """
        method = method.upper()
        headers = {**self._default_headers}
        if options is not None and options.headers:
            headers.update(options.headers)

        content: str | None = None
        if body is not None and method in BODY_METHODS:
            content = self._serialize_body(body)

        timeout_ms = options.timeout if options is not None and options.timeout else None

        return DispatchRequest(
            method=method,
            url=f"{self._config.base_url}{path}",
            headers=headers,
            content=content,
            timeout_ms=timeout_ms,
        )

    @staticmethod
    def _serialize_body(body: Any) -> str:
        """Serialize a payload to compact JSON text, keeping key order."""
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        elif isinstance(body, Mapping):
            body = dict(body)
        try:
            return json.dumps(body, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise FreshlearnValidationError(f"Request body is not JSON serializable: {e}") from e

    # =========================================================================
    # Response Classification
    # =========================================================================

    def handle_response(
        self,
        response: httpx.Response,
        cast_to: Any = None,
    ) -> ApiResponse[Any]:
        """Classify a response into an envelope.

        Args:
            response: A response whose body has already been read.
            cast_to: Optional result type used to narrow successful bodies.

        Returns:
            ApiResponse with success decided by the status code alone.
        """
        content_type = response.headers.get("content-type", "")

        data: Any = None
        if JSON_CONTENT_TYPE in content_type:
            try:
                data = response.json()
            except ValueError:
                self._log_debug(f"Unparseable JSON body (status {response.status_code})")
                data = None
        else:
            data = response.text

        if not response.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            if isinstance(message, str):
                error = message
            elif message is not None:
                error = str(message)
            else:
                error = f"Request failed with status {response.status_code}"

            self._log_debug(f"Request failed with status {response.status_code}: {error}")
            return ApiResponse(
                success=False,
                error=error,
                data=data,
                status_code=response.status_code,
            )

        if cast_to is not None:
            data = self._narrow(data, cast_to)

        self._log_debug(f"Request succeeded with status {response.status_code}")
        return ApiResponse(success=True, data=data, status_code=response.status_code)

    def _narrow(self, data: Any, cast_to: Any) -> Any:
        """Validate a successful body into the declared result type.

        The raw value is returned unchanged if it does not fit.
        """
        try:
            return TypeAdapter(cast_to).validate_python(data)
        except ValidationError as e:
            self._log_debug(f"Response did not match {cast_to!r}: {e.error_count()} errors")
            return data

    # =========================================================================
    # Dispatch
    # =========================================================================

    def dispatch(
        self,
        method: str,
        path: str,
        body: Any = None,
        options: RequestOptions | None = None,
        *,
        cast_to: Any = None,
    ) -> ApiResponse[Any]:
        """Send a request and return its envelope.

        With a timeout, the deadline covers the whole call: connecting,
        sending and reading the full body. The body is streamed and the
        deadline is checked as each chunk arrives, so a server that trickles
        the body cannot hold the call open past it.

        Args:
            method: HTTP verb.
            path: Path relative to the base URL.
            body: Optional payload, sent for POST/PUT only.
            options: Optional per-call header overrides and timeout (ms).
            cast_to: Optional result type used to narrow successful bodies.

        Returns:
            ApiResponse envelope.

        Raises:
            httpx.TimeoutException: If the deadline expires before the call settles.
            httpx.HTTPError: On any other transport failure.
            FreshlearnValidationError: If the body cannot be serialized.
        """
        request = self.build_request(method, path, body, options)
        self._log_request(request)

        deadline = None
        if request.timeout_seconds is not None:
            deadline = time.monotonic() + request.timeout_seconds

        with create_http_client(timeout=request.timeout_seconds) as client:
            with client.stream(
                request.method,
                request.url,
                headers=request.headers,
                content=request.content,
            ) as streamed:
                response = _read_before_deadline(streamed, deadline, request.timeout_ms)
        return self.handle_response(response, cast_to)

    async def adispatch(
        self,
        method: str,
        path: str,
        body: Any = None,
        options: RequestOptions | None = None,
        *,
        cast_to: Any = None,
    ) -> ApiResponse[Any]:
        """Async variant of dispatch().

        The deadline is scoped to the call: it is released on every exit path,
        and a response that settles before it fires is returned normally.

        Raises:
            httpx.TimeoutException: If the deadline expires before the call settles.
            httpx.HTTPError: On any other transport failure.
            FreshlearnValidationError: If the body cannot be serialized.
        """
        request = self.build_request(method, path, body, options)
        self._log_request(request)

        try:
            async with create_async_http_client() as client, _deadline(request.timeout_seconds):
                response = await client.request(
                    request.method,
                    request.url,
                    headers=request.headers,
                    content=request.content,
                )
        except TimeoutError as e:
            raise _deadline_exceeded(request.timeout_ms) from e
        return self.handle_response(response, cast_to)

    def _log_request(self, request: DispatchRequest) -> None:
        if self._config.debug:
            headers = redact_payload(request.headers)
            self._log_debug(f"{request.method} {request.url} headers={headers}")


def _deadline(seconds: float | None) -> contextlib.AbstractAsyncContextManager[Any]:
    """Scoped deadline for an async call, or a no-op scope without one."""
    if seconds is None:
        return contextlib.nullcontext()
    return asyncio.timeout(seconds)


def _deadline_exceeded(
    timeout_ms: int | None, request: httpx.Request | None = None
) -> httpx.TimeoutException:
    return httpx.TimeoutException(f"Request exceeded {timeout_ms}ms deadline", request=request)


def _read_before_deadline(
    streamed: httpx.Response,
    deadline: float | None,
    timeout_ms: int | None,
) -> httpx.Response:
    """Read a streamed body, failing as soon as the deadline has passed.

    Returns a fully read response built from the raw (still encoded) bytes,
    so content decoding happens once, in the returned response.
    """

    def check() -> None:
        if deadline is not None and time.monotonic() >= deadline:
            raise _deadline_exceeded(timeout_ms, streamed.request)

    check()
    chunks: list[bytes] = []
    for chunk in streamed.iter_raw():
        check()
        chunks.append(chunk)
    check()

    return httpx.Response(
        streamed.status_code,
        headers=streamed.headers,
        content=b"".join(chunks),
        request=streamed.request,
    )
