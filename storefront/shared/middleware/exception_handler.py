# -*- coding: utf-8 -*-
"""
storefront/shared/middleware/exception_handler.py

Manejo de errores del backend de referencia.

- JSONExceptionMiddleware: captura excepciones no manejadas y responde JSON 500
  con request_id para trazabilidad.
- register_exception_handlers(): renderiza DomainError y errores de validación
  con el formato {"statusCode", "message", "error"} que los bindings de cliente
  leen (campo `message`).

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

import logging
import uuid
from http import HTTPStatus
from typing import Callable

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from storefront.shared.errors import DomainError

logger = logging.getLogger(__name__)

# Header para request ID (proxy, nginx, etc.)
REQUEST_ID_HEADERS = ["x-request-id", "x-correlation-id"]


def get_request_id(request: Request) -> str:
    """Extrae request_id de headers o genera uno nuevo."""
    for header in REQUEST_ID_HEADERS:
        value = request.headers.get(header)
        if value:
            return value
    return uuid.uuid4().hex[:16]


def error_body(status_code: int, message: str) -> dict:
    try:
        error = HTTPStatus(status_code).phrase
    except ValueError:
        error = "Error"
    return {"statusCode": status_code, "message": message, "error": error}


class JSONExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware que captura excepciones no manejadas y devuelve JSON.

    Garantiza:
    - Content-Type: application/json (nunca text/plain)
    - request_id para correlación de logs
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = get_request_id(request)
        request.state.request_id = request_id

        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "unhandled_exception request_id=%s method=%s path=%s error=%s",
                request_id,
                request.method,
                request.url.path,
                repr(e),
            )
            body = error_body(500, "Internal server error")
            body["requestId"] = request_id
            return JSONResponse(
                status_code=500,
                content=body,
                headers={"X-Request-ID": request_id},
            )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.info(
        "domain_error path=%s status=%s message=%s",
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.status_code, exc.message))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        messages.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    message = "; ".join(messages) or "Validation failed"
    return JSONResponse(status_code=400, content=error_body(400, message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else HTTPStatus(exc.status_code).phrase
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_middleware(JSONExceptionMiddleware)


__all__ = [
    "JSONExceptionMiddleware",
    "get_request_id",
    "error_body",
    "register_exception_handlers",
]

# Fin del archivo storefront/shared/middleware/exception_handler.py
