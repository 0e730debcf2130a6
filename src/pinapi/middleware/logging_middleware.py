"""
Request Logging Middleware

Logs all API requests and responses.
"""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status code and processing time of every request."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        logger.info(f"→ {request.method} {request.url.path}")

        response: Response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(f"← {request.method} {request.url.path} [{response.status_code}] {process_time:.3f}s")

        response.headers["X-Process-Time"] = str(process_time)

        return response
