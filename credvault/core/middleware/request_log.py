# credvault/core/middleware/request_log.py

import logging
import time
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware

from credvault.core.logging import LOGGER_NAME, latency_bucket_ms, request_id_ctx_var


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Attach a request_id to each request and log one line when it completes."""

    def __init__(self, app, header_name: str = "x-request-id"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request, call_next):
        rid = request.headers.get(self.header_name) or str(uuid4())
        request.state.request_id = rid
        token = request_id_ctx_var.set(rid)

        start = time.perf_counter()
        try:
            response = await call_next(request)
            duration_ms = (time.perf_counter() - start) * 1000
            response.headers[self.header_name] = rid

            logging.getLogger(LOGGER_NAME).info(
                "request.complete",
                extra={
                    "request_id": rid,
                    "method": request.method,
                    "path": request.url.path,
                    "status": response.status_code,
                    "client_ip": request.client.host if request.client else None,
                    "latency_bucket": latency_bucket_ms(duration_ms),
                },
            )
            return response
        finally:
            request_id_ctx_var.reset(token)
