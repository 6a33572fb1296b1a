# -*- coding: utf-8 -*-
"""
storefront/modules/purchases/repository.py

Repositorio de compras.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.shared.database.repository import BaseRepository

from .enums import PurchaseStatus
from .models import Purchase

logger = logging.getLogger(__name__)


class PurchaseRepository(BaseRepository[Purchase]):

    def __init__(self):
        super().__init__(Purchase)

    async def list_all(self, session: AsyncSession) -> Sequence[Purchase]:
        result = await session.execute(select(Purchase).order_by(Purchase.created_at.desc()))
        return result.scalars().all()

    async def list_by_user(self, session: AsyncSession, user_id: str) -> Sequence[Purchase]:
        """Compras del usuario, más recientes primero. Sin límite."""
        stmt = (
            select(Purchase)
            .where(Purchase.user_id == user_id)
            .order_by(Purchase.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_active(self, session: AsyncSession, user_id: str, now: datetime) -> Sequence[Purchase]:
        stmt = (
            select(Purchase)
            .where(
                Purchase.user_id == user_id,
                Purchase.status == PurchaseStatus.COMPLETED.value,
                Purchase.start_date <= now,
                Purchase.end_date > now,
            )
            .order_by(Purchase.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_for_stats(self, session: AsyncSession, user_id: Optional[str] = None) -> Sequence[Purchase]:
        stmt = select(Purchase)
        if user_id:
            stmt = stmt.where(Purchase.user_id == user_id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_expiring(self, session: AsyncSession, start: datetime, until: datetime) -> Sequence[Purchase]:
        stmt = (
            select(Purchase)
            .where(
                Purchase.status == PurchaseStatus.COMPLETED.value,
                Purchase.end_date >= start,
                Purchase.end_date <= until,
            )
            .order_by(Purchase.end_date.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_idempotency_key(self, session: AsyncSession, idempotency_key: str) -> Optional[Purchase]:
        result = await session.execute(select(Purchase).where(Purchase.idempotency_key == idempotency_key))
        return result.scalar_one_or_none()

    async def create_or_get_existing(self, session: AsyncSession, **fields) -> tuple[Purchase, bool]:
        """
        Crea una compra o retorna la existente para la misma idempotency_key.

        Returns:
            Tuple de (Purchase, created: bool)
        """
        idempotency_key = fields.get("idempotency_key")
        if idempotency_key:
            existing = await self.get_by_idempotency_key(session, idempotency_key)
            if existing is not None:
                return existing, False

        try:
            return await self.create(session, **fields), True
        except IntegrityError:
            await session.rollback()
            if not idempotency_key:
                raise
            existing = await self.get_by_idempotency_key(session, idempotency_key)
            if existing is None:
                raise
            logger.info("Idempotent purchase reused: key=%s", idempotency_key)
            return existing, False

    async def expire_pending_for_sessions(self, session: AsyncSession, session_ids: Sequence[str]) -> int:
        """pending → expired para las compras originadas por esas sesiones."""
        if not session_ids:
            return 0
        stmt = (
            update(Purchase)
            .where(
                Purchase.checkout_session_id.in_(list(session_ids)),
                Purchase.status == PurchaseStatus.PENDING.value,
            )
            .values(status=PurchaseStatus.EXPIRED.value)
        )
        result = await session.execute(stmt)
        return result.rowcount


__all__ = ["PurchaseRepository"]

# Fin del archivo storefront/modules/purchases/repository.py
