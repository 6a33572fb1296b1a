# -*- coding: utf-8 -*-
"""
storefront/shared/http/__init__.py

Base de bindings de cliente y taxonomía de errores.

Autor: Storefront
Fecha: 2026-09-14
"""

from .api_client import ApiClient, quote_segment
from .errors import NotFoundError, RequestError, TransportFailure, ValidationFailure

__all__ = [
    "ApiClient",
    "quote_segment",
    "RequestError",
    "NotFoundError",
    "ValidationFailure",
    "TransportFailure",
]
