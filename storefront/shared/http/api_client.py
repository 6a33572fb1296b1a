# -*- coding: utf-8 -*-
"""
storefront/shared/http/api_client.py

Base de los bindings de cliente: mapeo request/response sobre httpx.

Convención de fallos:
- 2xx → JSON decodificado (None si el cuerpo está vacío).
- no-2xx → error con el campo `message` del cuerpo (una lista se une con "; "),
  o `fallback_message` si no existe o el cuerpo no es JSON.
- red/timeout/JSON inválido → TransportFailure con `fallback_message`; la causa
  original se registra en el log y no se encadena.

Sin caché, sin reintentos, sin deduplicación.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from storefront.shared.core.http_client_cache import get_http_client
from storefront.shared.http.errors import (
    NotFoundError,
    RequestError,
    TransportFailure,
    ValidationFailure,
)

logger = logging.getLogger(__name__)

_VALIDATION_STATUSES = {400, 409, 422}


def quote_segment(value: Any) -> str:
    """Escapa un segmento de ruta (ids opacos pueden contener '/')."""
    return quote(str(value), safe="")


def extract_message(response: httpx.Response) -> Optional[str]:
    """Lee el campo `message` del cuerpo de error, si existe."""
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(body, dict):
        return None
    message = body.get("message")
    if isinstance(message, list):
        parts = [str(m) for m in message if m is not None and str(m)]
        return "; ".join(parts) or None
    if isinstance(message, str) and message:
        return message
    return None


def error_from_response(response: httpx.Response, fallback_message: str) -> RequestError:
    message = extract_message(response) or fallback_message
    status = response.status_code
    if status == 404:
        return NotFoundError(message, status)
    if status in _VALIDATION_STATUSES:
        return ValidationFailure(message, status)
    return RequestError(message, status)


class ApiClient:
    """
    Binding base sin estado.

    Usa el cliente inyectado o, si no hay, el cliente HTTP global del proceso.
    """

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None):
        self._http_client = http_client

    async def _client(self) -> httpx.AsyncClient:
        if self._http_client is not None:
            return self._http_client
        return await get_http_client()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[dict] = None,
        fallback_message: str,
    ) -> Any:
        client = await self._client()
        logger.debug(f"Making {method} request to {path}")

        try:
            response = await client.request(method, path, json=json, params=params)
        except httpx.HTTPError as e:
            logger.error(f"❌ {method} {path} failed: {e!r}")
            raise TransportFailure(fallback_message) from None

        if not response.is_success:
            error = error_from_response(response, fallback_message)
            logger.warning(
                "%s %s rejected status=%s message=%s",
                method,
                path,
                response.status_code,
                error.message,
            )
            raise error

        if not response.content:
            return None
        try:
            return response.json()
        except (ValueError, UnicodeDecodeError) as e:
            logger.error(f"❌ {method} {path} returned a non-JSON body: {e!r}")
            raise TransportFailure(fallback_message) from None


__all__ = [
    "ApiClient",
    "quote_segment",
    "extract_message",
    "error_from_response",
]

# Fin del archivo storefront/shared/http/api_client.py
