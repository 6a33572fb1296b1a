# -*- coding: utf-8 -*-
"""
storefront/__init__.py

Paquete principal de Storefront: bindings HTTP de checkout/compras y
backend de referencia del ciclo de vida de sesiones de checkout y compras.

Autor: Storefront
Fecha: 2026-09-14
"""

__version__ = "0.1.0"

# Fin del archivo storefront/__init__.py
