# credvault/core/middleware/errors.py

from starlette.middleware.base import BaseHTTPMiddleware

from credvault.core.errors import unhandled_exception_handler


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turn unexpected exceptions into the generic 500 before the outer middleware runs."""

    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return await unhandled_exception_handler(request, exc)
