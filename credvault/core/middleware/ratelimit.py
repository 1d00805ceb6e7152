# credvault/core/middleware/ratelimit.py

import time
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from credvault.core.errors import RateLimitError, app_error_handler
from credvault.core.ratelimit import FixedWindowRateLimiter, RateLimitConfig


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Per-IP fixed-window limit over every route."""

    def __init__(self, app, *, config: Optional[RateLimitConfig] = None, time_fn: Optional[Callable[[], float]] = None):
        super().__init__(app)
        self.config = config or RateLimitConfig()
        self.limiter = FixedWindowRateLimiter(self.config, time_fn=time_fn or time.monotonic)

    @staticmethod
    def _client_key(request: Request) -> str:
        return request.client.host if request.client else "unknown"

    async def dispatch(self, request: Request, call_next):
        if not self.config.enabled:
            return await call_next(request)

        result = self.limiter.hit(self._client_key(request))
        if result.allowed:
            response = await call_next(request)
        else:
            response = await app_error_handler(request, RateLimitError("Too many requests from this IP"))
            response.headers["Retry-After"] = str(result.reset_after)

        response.headers["RateLimit-Limit"] = str(result.limit)
        response.headers["RateLimit-Remaining"] = str(result.remaining)
        response.headers["RateLimit-Reset"] = str(result.reset_after)
        return response
