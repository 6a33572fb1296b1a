# -*- coding: utf-8 -*-
"""
storefront/modules/checkout/providers/__init__.py

Proveedores de pago para el handoff del checkout.

Autor: Storefront
Fecha: 2026-09-14
"""

from .stripe_provider import (
    CheckoutProvider,
    ProviderNotConfigured,
    ProviderSessionResult,
    StripeProvider,
    build_session_params,
)

__all__ = [
    "CheckoutProvider",
    "ProviderNotConfigured",
    "ProviderSessionResult",
    "StripeProvider",
    "build_session_params",
]
