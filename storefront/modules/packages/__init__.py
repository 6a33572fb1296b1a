# -*- coding: utf-8 -*-
"""
storefront/modules/packages/__init__.py

Catálogo de paquetes y resolución de precio por ciclo.
Este módulo NO importa routes para evitar imports circulares.

Autor: Storefront
Fecha: 2026-09-14
"""

from .enums import BillingCycle
from .pricing import billing_cycle_discount, calculate_period_end, platform_fee, resolve_cycle_price

__all__ = [
    "BillingCycle",
    "resolve_cycle_price",
    "billing_cycle_discount",
    "calculate_period_end",
    "platform_fee",
]
