# techschool/middleware/logging.py
"""
Logging middleware for request/response tracking.

Binds a request id, the method and the path into structlog's context so
every log line emitted while handling the request carries them.
"""

import time
from uuid import uuid4

import structlog
from fastapi import Request

from techschool.core.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def logging_middleware(request: Request, call_next):
    """
    Log each request with its duration and echo the request id back.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
    )
    start_time = time.perf_counter()

    logger.info(
        "request started",
        client=request.client.host if request.client else None,
    )

    try:
        response = await call_next(request)
    except Exception:
        logger.exception(
            "request failed",
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        raise

    logger.info(
        "request completed",
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
    )
    response.headers[REQUEST_ID_HEADER] = request_id
    structlog.contextvars.clear_contextvars()
    return response
