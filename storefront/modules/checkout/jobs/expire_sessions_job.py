# -*- coding: utf-8 -*-
"""
storefront/modules/checkout/jobs/expire_sessions_job.py

Job programado para expirar sesiones de checkout vencidas y las compras
pending que esas sesiones originaron.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.modules.purchases.service import PurchaseService
from storefront.shared.config import get_settings
from storefront.shared.database.database import get_async_session_context
from storefront.shared.scheduler import get_scheduler

from ..service import CheckoutService

logger = logging.getLogger(__name__)

# ID del job para referencia
EXPIRE_SESSIONS_JOB_ID = "checkout_expire_sessions"


async def expire_checkout_sessions(
    session: Optional[AsyncSession] = None,
    now: Optional[datetime] = None,
) -> int:
    """
    Marca como 'expired' las sesiones pending con expires_at vencido y
    expira las compras pending vinculadas a ellas.

    Args:
        session: Sesión async opcional (si no se provee, crea una nueva)
        now: Instante de corte (default: ahora UTC)

    Returns:
        Número de sesiones expiradas
    """

    async def _do_expire(sess: AsyncSession) -> int:
        checkout = CheckoutService(sess, get_settings())
        expired_ids = await checkout.expire_sessions(now)
        purchases_expired = await PurchaseService(sess).expire_for_sessions(expired_ids)
        await sess.commit()

        if expired_ids:
            logger.info(
                "Expired %d checkout sessions and %d pending purchases",
                len(expired_ids),
                purchases_expired,
            )
        else:
            logger.debug("No checkout sessions to expire")
        return len(expired_ids)

    if session is not None:
        return await _do_expire(session)

    # Crear sesión propia para el job
    async with get_async_session_context() as sess:
        return await _do_expire(sess)


def register_expire_sessions_job(interval_minutes: int = 5) -> str:
    """
    Registra el job de expiración en el scheduler global.

    Returns:
        ID del job registrado
    """
    scheduler = get_scheduler()
    job_id = scheduler.add_interval_job(
        func=expire_checkout_sessions,
        job_id=EXPIRE_SESSIONS_JOB_ID,
        minutes=interval_minutes,
    )
    logger.info("Registered expire sessions job: id=%s interval=%d min", job_id, interval_minutes)
    return job_id


__all__ = [
    "expire_checkout_sessions",
    "register_expire_sessions_job",
    "EXPIRE_SESSIONS_JOB_ID",
]

# Fin del archivo storefront/modules/checkout/jobs/expire_sessions_job.py
