# -*- coding: utf-8 -*-
"""
storefront/modules/checkout/__init__.py

Ciclo de vida de la sesión de checkout.
Este módulo NO importa routes ni jobs para evitar imports circulares.

Autor: Storefront
Fecha: 2026-09-14
"""

from .enums import CheckoutSessionStatus

__all__ = ["CheckoutSessionStatus"]
