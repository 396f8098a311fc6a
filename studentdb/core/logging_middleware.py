import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """One access-log line per request, tagged with the app's data-access variant."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "using-%s %s %s -> %d in %.1fms",
            request.app.state.variant,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )

        return response
