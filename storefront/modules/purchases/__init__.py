# -*- coding: utf-8 -*-
"""
storefront/modules/purchases/__init__.py

Ciclo de vida de compras.
Este módulo NO importa routes para evitar imports circulares.

Autor: Storefront
Fecha: 2026-09-14
"""

from .enums import PaymentMethod, PurchaseStatus
from .lifecycle import ALLOWED_TRANSITIONS, can_transition, ensure_transition, is_terminal

__all__ = [
    "PurchaseStatus",
    "PaymentMethod",
    "ALLOWED_TRANSITIONS",
    "can_transition",
    "ensure_transition",
    "is_terminal",
]
