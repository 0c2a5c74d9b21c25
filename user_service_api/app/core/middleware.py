"""
HTTP middleware.

``RequestLoggingMiddleware`` logs one line per request with method,
path, status code, duration and client address, and reports the
processing time in the ``X-Process-Time`` response header.

``ExceptionHandlingMiddleware`` turns any exception that escaped the
typed handlers into a generic 500 error body.  It sits inside the
logging middleware, so failed requests are still logged with their
500 status, and it answers before Starlette's ``ServerErrorMiddleware``
sees the exception: the traceback is logged once, here, and the
server does not re-raise it.
"""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .errors import InternalError


logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        client = request.client.host if request.client else "-"
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.error("%s %s failed after %.2fms %s", request.method, request.url.path, duration_ms, client)
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %d %.2fms %s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            client,
        )
        response.headers["X-Process-Time"] = f"{duration_ms / 1000:.6f}"
        return response


class ExceptionHandlingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unexpected error on %s %s", request.method, request.url.path)
            error = InternalError("internal server error")
            return JSONResponse(status_code=error.status_code, content=error.to_dict())
