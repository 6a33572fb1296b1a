# -*- coding: utf-8 -*-
"""
storefront/modules/checkout/repository.py

Repositorio para checkout_sessions con manejo de idempotencia.

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

from .enums import CheckoutSessionStatus
from .models import CheckoutSession

logger = logging.getLogger(__name__)


class CheckoutSessionRepository:
    """Operaciones sobre checkout_sessions."""

    async def get_by_session_id(self, session: AsyncSession, session_id: str) -> Optional[CheckoutSession]:
        stmt = select(CheckoutSession).where(CheckoutSession.session_id == session_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_idempotency_key(self, session: AsyncSession, idempotency_key: str) -> Optional[CheckoutSession]:
        stmt = select(CheckoutSession).where(CheckoutSession.idempotency_key == idempotency_key)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, session: AsyncSession, **fields) -> CheckoutSession:
        checkout_session = CheckoutSession(**fields)
        session.add(checkout_session)
        await session.flush()
        return checkout_session

    async def create_or_get_existing(self, session: AsyncSession, **fields) -> tuple[CheckoutSession, bool]:
        """
        Crea una sesión o retorna la existente si la idempotency_key ya se usó.

        Returns:
            Tuple de (CheckoutSession, created: bool)
        """
        idempotency_key = fields.get("idempotency_key")
        if idempotency_key:
            existing = await self.get_by_idempotency_key(session, idempotency_key)
            if existing is not None:
                return existing, False

        try:
            return await self.create(session, **fields), True
        except IntegrityError:
            # Carrera: otra petición con la misma clave ganó el insert
            await session.rollback()
            if not idempotency_key:
                raise
            existing = await self.get_by_idempotency_key(session, idempotency_key)
            if existing is None:
                raise
            logger.info("Idempotent checkout session reused: key=%s", idempotency_key)
            return existing, False

    async def list_overdue_ids(self, session: AsyncSession, now: datetime) -> Sequence[str]:
        """session_id públicos de sesiones pendientes vencidas."""
        stmt = select(CheckoutSession.session_id).where(
            CheckoutSession.status == CheckoutSessionStatus.PENDING.value,
            CheckoutSession.expires_at < now,
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def mark_expired(self, session: AsyncSession, session_ids: Sequence[str]) -> Sequence[str]:
        """
        Expira solo las que sigan pending (no pisa un completed concurrente).

        Returns:
            session_id de las filas realmente actualizadas
        """
        if not session_ids:
            return []
        stmt = (
            update(CheckoutSession)
            .where(
                CheckoutSession.session_id.in_(list(session_ids)),
                CheckoutSession.status == CheckoutSessionStatus.PENDING.value,
            )
            .values(status=CheckoutSessionStatus.EXPIRED.value)
            .returning(CheckoutSession.session_id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def mark_completed(self, session: AsyncSession, session_id: str) -> bool:
        """pending → completed para una sesión; False si ya era final."""
        stmt = (
            update(CheckoutSession)
            .where(
                CheckoutSession.session_id == session_id,
                CheckoutSession.status == CheckoutSessionStatus.PENDING.value,
            )
            .values(status=CheckoutSessionStatus.COMPLETED.value)
        )
        result = await session.execute(stmt)
        return result.rowcount > 0


__all__ = ["CheckoutSessionRepository"]

# Fin del archivo storefront/modules/checkout/repository.py
