import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("remuneration.access")

class TimingMiddleware(BaseHTTPMiddleware):
    """Adds X-Latency-Ms and writes one access log line per request."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        status_code = 500  # stays 500 when the route raises
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["X-Latency-Ms"] = str(int((time.perf_counter() - start) * 1000))
            return response
        finally:
            latency_ms = int((time.perf_counter() - start) * 1000)
            logger.info("%s %s -> %s (%dms)", request.method, request.url.path, status_code, latency_ms)
