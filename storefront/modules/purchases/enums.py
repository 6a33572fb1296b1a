# -*- coding: utf-8 -*-
"""
storefront/modules/purchases/enums.py

Enums del ciclo de vida de compras.

Autor: Storefront
Fecha: 2026-09-14
"""

from enum import Enum


class PurchaseStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"
    REFUNDED = "refunded"


class PaymentMethod(str, Enum):
    """
    Método de pago:
    - stripe_card: cargo directo con tarjeta
    - stripe_popup: checkout hospedado (popup / redirect)
    - paypal: wallet alternativo
    - stripe: legacy
    """
    STRIPE_CARD = "stripe_card"
    STRIPE_POPUP = "stripe_popup"
    PAYPAL = "paypal"
    STRIPE = "stripe"


__all__ = ["PurchaseStatus", "PaymentMethod"]

# Fin del archivo storefront/modules/purchases/enums.py
