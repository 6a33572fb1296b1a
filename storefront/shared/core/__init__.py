# -*- coding: utf-8 -*-
"""
storefront/shared/core/__init__.py

Recursos compartidos de proceso (cliente HTTP global).

Autor: Storefront
Fecha: 2026-09-14
"""

from .http_client_cache import close_http_client, create_http_client, get_http_client
from .resources_cache import resources

__all__ = [
    "create_http_client",
    "get_http_client",
    "close_http_client",
    "resources",
]
