# -*- coding: utf-8 -*-
"""
storefront/shared/middleware/__init__.py

Autor: Storefront
Fecha: 2026-09-14
"""

from .exception_handler import JSONExceptionMiddleware, error_body, get_request_id, register_exception_handlers

__all__ = [
    "JSONExceptionMiddleware",
    "error_body",
    "get_request_id",
    "register_exception_handlers",
]
