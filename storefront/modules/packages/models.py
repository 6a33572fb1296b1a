# -*- coding: utf-8 -*-
"""
storefront/modules/packages/models.py

Modelos ORM del catálogo: tiendas y paquetes.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.shared.database.base import Base, UTCDateTime, new_uuid, utcnow


class Shop(Base):
    """
    Tienda que publica paquetes.

    Solo puede cobrar cuando su cuenta conectada de Stripe tiene cargos
    habilitados (KYC completado).
    """

    __tablename__ = "shops"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    owner_id: Mapped[str] = mapped_column(String(36), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    stripe_account_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    stripe_charges_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    platform_fee_percent: Mapped[float] = mapped_column(
        Numeric(5, 2, asdecimal=False),
        nullable=False,
        default=15.0,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<Shop id={self.id} slug={self.slug} charges_enabled={self.stripe_charges_enabled}>"


class Package(Base):
    """Paquete digital con tabla de precios por ciclo."""

    __tablename__ = "packages"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    shop_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("shops.id"),
        nullable=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    base_price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    weekly_price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    monthly_price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    yearly_price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)

    features: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    images: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    is_subscription: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    trial_days: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<Package id={self.id} name={self.name!r} active={self.is_active}>"


__all__ = ["Shop", "Package"]

# Fin del archivo storefront/modules/packages/models.py
