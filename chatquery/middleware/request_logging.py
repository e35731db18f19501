"""Per-request structured logging for the chat API."""

import logging
import time
from typing import Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from chatquery.utils.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Polled by load balancers; only logged at debug level.
QUIET_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log its outcome and latency."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        logger.set_request_id(request_id)

        path = request.url.path
        fields = {
            "request_id": request_id,
            "endpoint": path,
            "method": request.method,
            "client_ip": request.client.host if request.client else "unknown",
        }
        quiet = path in QUIET_PATHS
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            fields["status_code"] = 500
            fields["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            logger.error(f"{request.method} {path} failed: {e}", extra=fields, exc_info=True)
            raise

        fields["status_code"] = response.status_code
        fields["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
        if quiet:
            level = logging.DEBUG
        elif response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO
        logger.log(level, f"{request.method} {path} {response.status_code}", extra=fields)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
