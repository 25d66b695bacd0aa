"""
FastAPI middleware for request logging.

Every request gets a short request_id that is attached to all log lines
emitted while it is handled and returned in the X-Request-ID header.

Middleware Stack Order (in main.py):
    1. LoggingMiddleware (outermost - captures everything)
    2. CORS Middleware
    3. Application routes
"""

import logging
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from core.logging_config import set_request_id, clear_request_id

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Request/response logging middleware with request_id propagation.

    Log Output (JSON):
    {
        "message": "Request completed",
        "request_id": "abc12345",
        "extra": {"method": "GET", "path": "/api/v1/reports/unpaid-bills",
                  "status_code": 200, "duration_ms": 4.2}
    }
    """

    # Probe and docs endpoints are not logged
    EXCLUDED_PATHS = {"/health", "/ready", "/docs", "/redoc", "/openapi.json"}

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())[:8]
        set_request_id(request_id)

        method = request.method
        path = request.url.path
        logged = path not in self.EXCLUDED_PATHS
        start_time = time.perf_counter()

        if logged:
            logger.info(
                "Request started",
                extra={
                    "method": method,
                    "path": path,
                    "query": str(request.query_params) if request.query_params else None,
                }
            )

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed with exception",
                extra={"method": method, "path": path}
            )
            clear_request_id()
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        if logged:
            logger.log(
                logging.WARNING if response.status_code >= 400 else logging.INFO,
                "Request completed",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "duration_ms": round(duration_ms, 2),
                }
            )
        clear_request_id()

        response.headers["X-Request-ID"] = request_id
        return response
