# -*- coding: utf-8 -*-
"""
storefront/modules/checkout/enums.py

Autor: Storefront
Fecha: 2026-09-14
"""

from enum import Enum


class CheckoutSessionStatus(str, Enum):
    """Estados de una sesión de checkout. completed/expired son finales."""
    PENDING = "pending"
    COMPLETED = "completed"
    EXPIRED = "expired"


__all__ = ["CheckoutSessionStatus"]

# Fin del archivo storefront/modules/checkout/enums.py
