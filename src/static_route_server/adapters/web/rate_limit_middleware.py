"""Per-client rate limiting in front of the static routes, using throttled-py."""

import logging
import math
from collections.abc import Awaitable, Callable, Iterable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

logger = logging.getLogger(__name__)


def extract_client_ip(request: Request) -> str:
    """Extract client IP address from request, supporting X-Forwarded-For header.

    X-Forwarded-For may list several addresses (client, proxy1, proxy2); the
    first one is the original client.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip

    if request.client and request.client.host:
        return request.client.host

    logger.warning("Could not determine client IP, using 'unknown'")
    return "unknown"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Token bucket per client IP, shared by every static route."""

    def __init__(
        self,
        app: Callable,
        requests_per_minute: int = 100,
        exempt_paths: Iterable[str] = (),
    ) -> None:
        """Initialize rate limiting middleware.

        Args:
            app: The ASGI application to wrap.
            requests_per_minute: Requests allowed per client IP per minute.
                Zero or less disables limiting.
            exempt_paths: Exact request paths that are never limited, such as
                the health check.
        """
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.exempt_paths = frozenset(exempt_paths)
        self.throttle: Throttled | None = None
        if requests_per_minute > 0:
            self.throttle = Throttled(
                using=RateLimiterType.TOKEN_BUCKET.value,
                quota=rate_limiter.per_min(requests_per_minute, burst=requests_per_minute),
                store=store.MemoryStore(),
            )
            logger.info(f"Rate limiting enabled: {requests_per_minute} requests per minute per IP")
        else:
            logger.info("Rate limiting disabled")

    def retry_after_for(self, request: Request) -> int | None:
        """Take one token for the request's client.

        Returns:
            None when the request may pass, otherwise the whole seconds
            (at least 1) the client should wait.
        """
        if self.throttle is None or request.url.path in self.exempt_paths:
            return None

        client_ip = extract_client_ip(request)
        result = self.throttle.limit(client_ip)
        if not result.limited:
            return None

        retry_after = max(1, math.ceil(result.state.retry_after))
        logger.warning(
            f"Rate limit exceeded for IP {client_ip} on {request.url.path}, "
            f"retry after {retry_after} seconds"
        )
        return retry_after

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Reject the request with 429 when its client has no tokens left."""
        retry_after = self.retry_after_for(request)
        if retry_after is not None:
            return PlainTextResponse(
                "Rate limit exceeded. Please try again later.",
                status_code=429,
                headers={"Retry-After": str(retry_after)},
            )

        response: Response = await call_next(request)
        return response
