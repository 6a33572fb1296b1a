# -*- coding: utf-8 -*-
"""
storefront/shared/http/errors.py

Taxonomía de errores de los bindings de cliente.

Todos los fallos se re-lanzan como RequestError (un único tipo capturable)
con un mensaje legible; las subclases permiten distinguir la causa sin
preservar códigos estructurados del backend.

Autor: Storefront
Fecha: 2026-09-14
"""

from typing import Optional


class RequestError(Exception):
    """Error de una llamada a la API; `message` es apto para mostrar al usuario."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class NotFoundError(RequestError):
    """El backend respondió 404."""


class ValidationFailure(RequestError):
    """El backend rechazó la entrada (400 / 409 / 422)."""


class TransportFailure(RequestError):
    """Red, timeout o respuesta no JSON. Solo lleva el mensaje genérico."""


__all__ = [
    "RequestError",
    "NotFoundError",
    "ValidationFailure",
    "TransportFailure",
]

# Fin del archivo storefront/shared/http/errors.py
