"""Per-client rate limiting of RPC mutations using throttled-py."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

from vibrovolt.domain.models.error_details import ErrorDetails

logger = logging.getLogger(__name__)

RPC_PREFIX = "/rpc/"
DEFAULT_RETRY_AFTER_SECONDS = 60.0


def extract_client_ip(request: Request) -> str:
    """Return the originating client IP, honouring the first X-Forwarded-For entry."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def limit_key(request: Request) -> str | None:
    """Rate limit bucket for a request, or None when the request is not limited.

    Only mutations (POST calls to RPC procedures) are limited, each procedure in its
    own bucket, so repeated login attempts cannot starve station queries.
    """
    path = request.url.path
    if request.method != "POST" or not path.startswith(RPC_PREFIX):
        return None
    procedure = path[len(RPC_PREFIX) :]
    return f"{extract_client_ip(request)}:{procedure}"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Rejects mutation calls above the configured per-minute quota."""

    def __init__(self, app: Callable, requests_per_minute: int = 100) -> None:
        """Initialize rate limiting middleware.

        Args:
            app: The ASGI application to wrap.
            requests_per_minute: Mutation calls allowed per client and procedure per minute.
        """
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.quota = rate_limiter.per_min(requests_per_minute, burst=requests_per_minute)
        self.rate_limiter_store = store.MemoryStore()
        logger.info(f"Rate limiting mutations to {requests_per_minute} calls per minute per client")

    @staticmethod
    def _retry_after(result: Any) -> float:
        state = getattr(result, "state", None)
        retry_after = getattr(state, "retry_after", None)
        if retry_after is None:
            return DEFAULT_RETRY_AFTER_SECONDS
        return float(retry_after)

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        key = limit_key(request)
        if key is None:
            return await call_next(request)

        throttle = Throttled(
            key=key,
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=self.quota,
            store=self.rate_limiter_store,
        )
        result = throttle.limit()
        if not result.limited:
            return await call_next(request)

        retry_after = self._retry_after(result)
        logger.warning(f"Rate limit exceeded for {key}, retry after {retry_after:.0f}s")
        error = ErrorDetails(
            code="TOO_MANY_REQUESTS",
            message="Rate limit exceeded. Please try again later.",
            status_code=429,
        )
        return JSONResponse(
            {"error": error.model_dump(exclude_none=True)},
            status_code=429,
            headers={"Retry-After": str(max(1, int(retry_after)))},
        )
