"""Request logging middleware."""

import logging
import time
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration for every request."""

    def __init__(self, app, logger: Optional[logging.Logger] = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("shortlink.web")

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # The 500 payload is produced further out, by the server error handler
            self._log(request, 500, start_time)
            raise
        self._log(request, response.status_code, start_time)
        return response

    def _log(self, request: Request, status_code: int, start_time: float) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.info(
            "%s %s -> %s (%.2fms)",
            request.method,
            request.url.path,
            status_code,
            duration_ms,
        )
