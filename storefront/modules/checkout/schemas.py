# -*- coding: utf-8 -*-
"""
storefront/modules/checkout/schemas.py

Contratos JSON del checkout (camelCase en el cable), compartidos por el
backend de referencia y por CheckoutClient.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import AliasChoices, Field

from storefront.modules.packages.enums import BillingCycle
from storefront.shared.schemas import CamelModel

from .enums import CheckoutSessionStatus


class BuyerDetails(CamelModel):
    """Datos del comprador capturados en el formulario de checkout."""
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None


class CreateCheckoutSessionRequest(CamelModel):
    package_id: str = Field(..., min_length=1)
    billing_cycle: BillingCycle
    email: Optional[str] = None
    name: Optional[str] = None
    custom_amount: Optional[float] = Field(default=None, ge=0)
    metadata: Optional[dict[str, Any]] = None
    idempotency_key: Optional[str] = Field(default=None, max_length=100)


class CheckoutSessionCreated(CamelModel):
    session_id: str
    checkout_url: str


class ProviderCheckoutLink(CamelModel):
    url: str


class CheckoutSessionOut(CamelModel):
    id: str
    session_id: str
    package_id: str
    shop_id: str
    billing_cycle: BillingCycle
    price: float
    platform_fee: float
    email: Optional[str] = None
    name: Optional[str] = None
    expires_at: datetime
    stripe_checkout_session_id: Optional[str] = None
    status: CheckoutSessionStatus
    custom_amount: Optional[float] = None
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("metadata_json", "metadata"),
    )
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


__all__ = [
    "BuyerDetails",
    "CreateCheckoutSessionRequest",
    "CheckoutSessionCreated",
    "ProviderCheckoutLink",
    "CheckoutSessionOut",
]

# Fin del archivo storefront/modules/checkout/schemas.py
