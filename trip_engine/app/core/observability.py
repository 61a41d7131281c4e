"""
Observability middleware.

Tags every request with a correlation ID and logs which trip check was
served, how long it took, and how it ended.
"""

import time
import uuid
import logging
from typing import Optional
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("trip_engine.http")

CHECK_PREFIX = "/trip-checks/"


def check_name(path: str) -> Optional[str]:
    """Engine check behind a path, e.g. ``/v1/trip-checks/start`` -> ``start``."""
    _, found, rest = path.partition(CHECK_PREFIX)
    if not found or not rest:
        return None
    return rest.strip("/").split("/")[0]


class ObservabilityMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get("X-Correlation-ID", str(uuid.uuid4()))
        check = check_name(request.url.path)
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Correlation-ID"] = correlation_id
        response.headers["X-Process-Time"] = str(elapsed_ms)
        if check:
            response.headers["X-Trip-Check"] = check

        log_data = {
            "correlation_id": correlation_id,
            "check": check,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(elapsed_ms, 2),
        }

        # Policy blocks are 200s; only malformed input or engine faults land here
        if response.status_code >= 500:
            logger.error("Trip check failed" if check else "Request Failed", extra=log_data)
        elif response.status_code >= 400:
            logger.warning("Trip check rejected input" if check else "Request Error", extra=log_data)
        else:
            logger.info("Trip check served" if check else "Request API", extra=log_data)

        return response
