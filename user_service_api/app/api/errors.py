"""
Exception handlers that render every failure as a JSON error body.

All error responses share one envelope::

    {"error": {"type": "...", "message": "...", "field": "..."}}

``field`` is only present for field-scoped validation errors.
Exceptions that are not ``AppError`` or HTTP errors are handled by
``core.middleware.ExceptionHandlingMiddleware`` rather than here: a
handler registered for ``Exception`` runs inside Starlette's
``ServerErrorMiddleware``, which re-raises after responding.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.errors import INTERNAL_ERROR, NOT_FOUND_ERROR, AppError


logger = logging.getLogger(__name__)

BAD_REQUEST_ERROR = "BAD_REQUEST_ERROR"
METHOD_NOT_ALLOWED_ERROR = "METHOD_NOT_ALLOWED_ERROR"
HTTP_ERROR = "HTTP_ERROR"


def error_body(error_type: str, message: str, field: Optional[str] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"type": error_type, "message": message}
    if field:
        body["field"] = field
    return {"error": body}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.type == INTERNAL_ERROR:
        logger.error("Internal error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc.cause)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # The body did not decode into the expected shape; the service is never called.
    logger.debug("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(BAD_REQUEST_ERROR, "invalid JSON body"),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        content = error_body(NOT_FOUND_ERROR, "endpoint not found")
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        content = error_body(METHOD_NOT_ALLOWED_ERROR, "method not allowed")
    else:
        content = error_body(HTTP_ERROR, str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
