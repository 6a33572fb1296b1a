# -*- coding: utf-8 -*-
"""
storefront/shared/errors.py

Excepciones de dominio del backend de referencia.

Cada excepción conoce su status HTTP; los handlers de
shared/middleware/exception_handler.py las renderizan como
{"statusCode", "message", "error"}.

Autor: Storefront
Fecha: 2026-09-14
"""


class DomainError(Exception):
    """Error de dominio genérico (400)."""
    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ResourceNotFound(DomainError):
    """Se lanza cuando no se encuentra un recurso por ID."""
    status_code = 404


class BusinessRuleViolation(DomainError):
    """Se lanza cuando la operación viola una regla de negocio."""
    status_code = 400


class InvalidStateTransition(BusinessRuleViolation):
    """Se lanza cuando se intenta una transición de estado inválida."""

    def __init__(self, from_state, to_state, message=None):
        self.from_state = from_state
        self.to_state = to_state
        default_msg = f"Invalid status transition: {from_state} -> {to_state}"
        super().__init__(message or default_msg)


__all__ = [
    "DomainError",
    "ResourceNotFound",
    "BusinessRuleViolation",
    "InvalidStateTransition",
]

# Fin del archivo storefront/shared/errors.py
