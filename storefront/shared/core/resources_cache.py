# -*- coding: utf-8 -*-
"""
storefront/shared/core/resources_cache.py

Contenedor singleton de recursos globales compartidos.
Mantiene el cliente HTTP usado por los bindings de la API.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations
from typing import Optional

import httpx


class GlobalResources:
    """Contenedor de recursos globales compartidos (instancia única por proceso)."""

    def __init__(self) -> None:
        self.http_client: Optional[httpx.AsyncClient] = None


# Instancia singleton de recursos globales
resources = GlobalResources()


# Fin del archivo storefront/shared/core/resources_cache.py
