"""
API Middleware - Request context, error mapping and rate limiting.

Provides:
- RequestContextMiddleware: request ID propagation and latency logging
- ErrorHandlerMiddleware: LubaUIError -> JSON error body with HTTP status
- RateLimitMiddleware: fixed one-minute window per client address
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Awaitable, Callable, Iterable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from lubaui_mcp.config.errors import ErrorCode, LubaUIError

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_EXEMPT_PATHS",
    "ErrorHandlerMiddleware",
    "FixedWindowLimiter",
    "RateLimitMiddleware",
    "RequestContextMiddleware",
    "error_code_to_status",
    "error_response",
]

CallNext = Callable[[Request], Awaitable[Response]]

REQUEST_ID_HEADER = "X-Request-ID"

# Documentation and liveness endpoints never count against the limit
DEFAULT_EXEMPT_PATHS = frozenset({"/health", "/docs", "/redoc", "/openapi.json"})

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.LOOKUP_INVALID_CATEGORY: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.TOOL_NOT_FOUND: 404,
    ErrorCode.SECURITY_RATE_LIMITED: 429,
    ErrorCode.CATALOG_LOAD_FAILED: 503,
    ErrorCode.CATALOG_INVALID: 503,
}


def error_code_to_status(code: ErrorCode) -> int:
    """HTTP status for an error code; unmapped codes are server errors."""
    return STATUS_BY_CODE.get(code, 500)


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def error_response(
    request: Request,
    error: LubaUIError,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render an error as ``{"error": {...}, "request_id": ...}``."""
    return JSONResponse(
        status_code=error_code_to_status(error.code),
        content={"error": error.to_dict(), "request_id": _request_id(request)},
        headers=headers,
    )


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an ID and log its latency.

    A client-supplied ``X-Request-ID`` is reused so calls can be traced
    across services; otherwise a UUID4 is generated.
    """

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        request.state.request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        response.headers["X-Response-Time-Ms"] = f"{elapsed_ms:.2f}"

        logger.info(
            "%s %s status=%d latency_ms=%.2f request_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request.state.request_id,
        )
        return response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Convert exceptions from inner layers into JSON error responses."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        try:
            return await call_next(request)
        except LubaUIError as e:
            logger.warning(
                "%s on %s: %s request_id=%s",
                e.code.value,
                request.url.path,
                e.message,
                _request_id(request),
            )
            return error_response(request, e)
        except Exception:
            logger.exception(
                "Unhandled error on %s request_id=%s", request.url.path, _request_id(request)
            )
            return error_response(
                request, LubaUIError(ErrorCode.INTERNAL_ERROR, "Internal server error")
            )


class FixedWindowLimiter:
    """
    Per-key request counter over fixed windows.

    Only the current window's counters are held: the first hit in a new
    window discards everything counted before it.

    Attributes:
        limit: Requests allowed per key per window
        window_seconds: Window length
    """

    def __init__(
        self,
        limit: int,
        window_seconds: int = 60,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._window = -1
        self._counts: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._counts)

    def hit(self, key: str) -> int | None:
        """
        Count one request for ``key``.

        Returns:
            Requests left in the window, or None when the key is over its limit
        """
        window = int(self._clock() // self.window_seconds)
        if window != self._window:
            if self._counts:
                logger.debug("Rate window rolled over, dropping %d counters", len(self._counts))
            self._window = window
            self._counts = {}

        used = self._counts.get(key, 0)
        if used >= self.limit:
            return None

        self._counts[key] = used + 1
        return self.limit - used - 1

    def retry_after(self) -> int:
        """Seconds until the current window ends."""
        now = self._clock()
        return max(1, int((self._window + 1) * self.window_seconds - now))


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject clients that exceed ``requests_per_minute`` with a 429."""

    def __init__(
        self,
        app: ASGIApp,
        requests_per_minute: int = 60,
        exempt_paths: Iterable[str] = DEFAULT_EXEMPT_PATHS,
        limiter: FixedWindowLimiter | None = None,
    ) -> None:
        super().__init__(app)
        self.limiter = limiter or FixedWindowLimiter(requests_per_minute)
        self.exempt_paths = frozenset(exempt_paths)

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        if request.url.path in self.exempt_paths:
            return await call_next(request)

        client = request.client.host if request.client else "unknown"
        remaining = self.limiter.hit(client)

        if remaining is None:
            retry_after = self.limiter.retry_after()
            logger.warning("Rate limit exceeded for %s request_id=%s", client, _request_id(request))
            error = LubaUIError(
                ErrorCode.SECURITY_RATE_LIMITED,
                f"Too many requests. Please retry after {retry_after} seconds.",
                details={"retry_after": retry_after},
            )
            return error_response(request, error, headers={"Retry-After": str(retry_after)})

        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(self.limiter.limit)
        response.headers["X-RateLimit-Remaining"] = str(remaining)
        return response

