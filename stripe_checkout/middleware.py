import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .config import LOG_REQUESTS
from .logging import console_logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with an id. The id is echoed as X-Request-ID and bound
    into the log context, so checkout_session.* and stripe_api_error events
    carry it. Start/end lines are only written when LOG_REQUESTS is set.
    """

    LOGGING_ENABLED = LOG_REQUESTS

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start = time.perf_counter()
        if self.LOGGING_ENABLED:
            console_logger.info("request.start", method=request.method, path=request.url.path)

        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers["X-Request-ID"] = request_id
        if self.LOGGING_ENABLED:
            console_logger.info(
                "request.end",
                request_id=request_id,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
        return response
