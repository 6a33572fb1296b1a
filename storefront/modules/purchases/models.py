# -*- coding: utf-8 -*-
"""
storefront/modules/purchases/models.py

Modelo ORM para la tabla purchases.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Boolean, ForeignKey, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.shared.database.base import Base, UTCDateTime, new_uuid, utcnow

from .enums import PurchaseStatus


class Purchase(Base):
    """
    Registro comercial de una compra, independiente de la mecánica del proveedor.

    El backend es el único que escribe `status`; toda transición pasa por
    purchases.lifecycle.ensure_transition.
    """

    __tablename__ = "purchases"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    package_id: Mapped[str] = mapped_column(String(36), ForeignKey("packages.id"), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    billing_cycle: Mapped[str] = mapped_column(String(20), nullable=False)
    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=PurchaseStatus.PENDING.value)

    payment_method: Mapped[str] = mapped_column(String(20), nullable=False)
    payment_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    customer_email: Mapped[str] = mapped_column(String(255), nullable=False)
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Ventana de suscripción
    start_date: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    end_date: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    is_recurring: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    metadata_json: Mapped[dict] = mapped_column("metadata", JSON, nullable=False, default=dict)

    # session_id público de la sesión de checkout que originó la compra
    checkout_session_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)
    idempotency_key: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, unique=True)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index("ix_purchases_status_end_date", "status", "end_date"),
    )

    def __repr__(self) -> str:
        return f"<Purchase id={self.id} user={self.user_id} package={self.package_id} status={self.status}>"


__all__ = ["Purchase", "PurchaseStatus"]

# Fin del archivo storefront/modules/purchases/models.py
