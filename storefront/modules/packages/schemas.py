# -*- coding: utf-8 -*-
"""
storefront/modules/packages/schemas.py

Contratos JSON del catálogo (camelCase en el cable).

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from storefront.shared.schemas import CamelModel


class PackageOut(CamelModel):
    id: str
    shop_id: Optional[str] = None
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    base_price: float
    weekly_price: float
    monthly_price: float
    yearly_price: float
    features: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    category: Optional[str] = None
    is_subscription: bool = False
    trial_days: Optional[int] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PriceQuote(CamelModel):
    """Precio de un paquete para un ciclo."""
    price: float
    currency: str = "USD"


__all__ = ["PackageOut", "PriceQuote"]

# Fin del archivo storefront/modules/packages/schemas.py
