# -*- coding: utf-8 -*-
"""
storefront/modules/purchases/schemas.py

Contratos JSON de compras (camelCase en el cable).

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import AliasChoices, Field

from storefront.modules.packages.enums import BillingCycle
from storefront.shared.schemas import CamelModel

from .enums import PaymentMethod, PurchaseStatus


class CreatePurchaseRequest(CamelModel):
    package_id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    billing_cycle: BillingCycle
    payment_method: PaymentMethod
    customer_email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    customer_name: str = Field(..., min_length=1, max_length=255)
    is_recurring: bool = False
    metadata: Optional[dict[str, Any]] = None
    checkout_session_id: Optional[str] = None
    idempotency_key: Optional[str] = Field(default=None, max_length=100)


class CompletePurchaseRequest(CamelModel):
    payment_id: str = Field(..., min_length=1)


class ExtendPurchaseRequest(CamelModel):
    days: int


class PurchaseOut(CamelModel):
    id: str
    package_id: str
    user_id: str
    billing_cycle: BillingCycle
    price: float
    status: PurchaseStatus
    payment_method: PaymentMethod
    payment_id: Optional[str] = None
    customer_email: str
    customer_name: str
    start_date: datetime
    end_date: datetime
    is_recurring: bool = False
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("metadata_json", "metadata"),
    )
    checkout_session_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PurchaseStats(CamelModel):
    total: int
    active: int
    expired: int
    total_spent: float


__all__ = [
    "CreatePurchaseRequest",
    "CompletePurchaseRequest",
    "ExtendPurchaseRequest",
    "PurchaseOut",
    "PurchaseStats",
]

# Fin del archivo storefront/modules/purchases/schemas.py
