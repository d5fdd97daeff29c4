# src/tareas_api/api/errors.py

"""
Terminal error responder: every failure leaves the API as {"error": message}.
Stack traces stay in the server log.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.errors import ApiError, InternalError

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Ruta no encontrada"
BAD_BODY = "Cuerpo de la petición inválido"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _on_api_error(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %r", request.method, request.url.path, exc, exc_info=exc)
    return _error(exc.status_code, exc.message)


async def _on_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # 405 means the path exists for another method; to clients it is still no route.
    if exc.status_code in (404, 405):
        return _error(404, ROUTE_NOT_FOUND)
    return _error(exc.status_code, str(exc.detail))


async def _on_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Invalid request body on %s %s: %s", request.method, request.url.path, exc.errors())
    return _error(400, BAD_BODY)


async def _on_unexpected(request: Request, exc: Exception) -> JSONResponse:
    # Starlette re-raises after this response is sent; the server log carries the traceback.
    return _error(500, InternalError.default_message)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _on_api_error)
    app.add_exception_handler(StarletteHTTPException, _on_http_error)
    app.add_exception_handler(RequestValidationError, _on_validation_error)
    app.add_exception_handler(Exception, _on_unexpected)
