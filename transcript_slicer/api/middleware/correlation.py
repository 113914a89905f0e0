"""Correlation ID middleware for request tracking."""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from transcript_slicer.lib.logging_config import correlation_id_var, log_with_context

logger = logging.getLogger(__name__)


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware to add correlation IDs to requests and responses.

    If a request includes an X-Correlation-ID header, it is reused.
    Otherwise, a new UUID is generated.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())

        # Store in request state for access in handlers
        request.state.correlation_id = correlation_id
        token = correlation_id_var.set(correlation_id)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        log_with_context(
            logger,
            "info",
            f"{request.method} {request.url.path} -> {response.status_code}",
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )

        response.headers["X-Correlation-ID"] = correlation_id
        return response
