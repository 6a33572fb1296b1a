# -*- coding: utf-8 -*-
"""
storefront/modules/packages/enums.py

Enums del catálogo.

Autor: Storefront
Fecha: 2026-09-14
"""

from enum import Enum


class BillingCycle(str, Enum):
    """Ciclos de cobro soportados por la tabla de precios de un paquete."""
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


__all__ = ["BillingCycle"]

# Fin del archivo storefront/modules/packages/enums.py
