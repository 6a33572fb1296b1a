# -*- coding: utf-8 -*-
"""
storefront/modules/checkout/models.py

Modelo ORM para la tabla checkout_sessions.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, ForeignKey, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.shared.database.base import Base, UTCDateTime, new_uuid, utcnow

from .enums import CheckoutSessionStatus


class CheckoutSession(Base):
    """
    Sesión de checkout de un paquete.

    `session_id` es el identificador público (va en la URL); `id` es interno.
    Una vez completed/expired la sesión no vuelve a mutar.
    """

    __tablename__ = "checkout_sessions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    session_id: Mapped[str] = mapped_column(String(36), nullable=False, unique=True, default=new_uuid)

    package_id: Mapped[str] = mapped_column(String(36), ForeignKey("packages.id"), nullable=False)
    shop_id: Mapped[str] = mapped_column(String(36), ForeignKey("shops.id"), nullable=False)

    # Datos del comprador (opcionales hasta el handoff al proveedor)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    billing_cycle: Mapped[str] = mapped_column(String(20), nullable=False)
    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    platform_fee: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    custom_amount: Mapped[Optional[float]] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=True)

    stripe_checkout_session_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=CheckoutSessionStatus.PENDING.value,
    )
    expires_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)

    metadata_json: Mapped[dict] = mapped_column("metadata", JSON, nullable=False, default=dict)
    idempotency_key: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, unique=True)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index("ix_checkout_sessions_status_expires", "status", "expires_at"),
    )

    def is_overdue(self, now: datetime) -> bool:
        return self.status == CheckoutSessionStatus.PENDING.value and self.expires_at < now

    def __repr__(self) -> str:
        return f"<CheckoutSession session_id={self.session_id} package={self.package_id} status={self.status}>"


__all__ = ["CheckoutSession", "CheckoutSessionStatus"]

# Fin del archivo storefront/modules/checkout/models.py
