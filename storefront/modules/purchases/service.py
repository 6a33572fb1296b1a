# -*- coding: utf-8 -*-
"""
storefront/modules/purchases/service.py

Servicio de compras (backend de referencia).

Toda mutación de `status` pasa por lifecycle.ensure_transition.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.modules.checkout.enums import CheckoutSessionStatus
from storefront.modules.checkout.errors import CheckoutSessionNotFound, CheckoutSessionNotPending
from storefront.modules.checkout.repository import CheckoutSessionRepository
from storefront.modules.packages.enums import BillingCycle
from storefront.modules.packages.models import Package
from storefront.modules.packages.pricing import calculate_period_end, resolve_cycle_price
from storefront.modules.packages.service import PackageService
from storefront.shared.database.base import utcnow
from storefront.shared.errors import BusinessRuleViolation

from .enums import PurchaseStatus
from .errors import CheckoutSessionMismatch, PurchaseNotFound
from .lifecycle import ensure_transition, is_active
from .models import Purchase
from .repository import PurchaseRepository
from .schemas import CreatePurchaseRequest, PurchaseStats

logger = logging.getLogger(__name__)


class PurchaseService:

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = PurchaseRepository()
        self.packages = PackageService(session)
        self.checkout_sessions = CheckoutSessionRepository()

    # -------------------------------------------------------------
    # Creación
    # -------------------------------------------------------------
    async def create(self, request: CreatePurchaseRequest) -> Purchase:
        """
        Crea la compra en pending con el precio de la tabla del paquete
        para el ciclo pedido y la ventana [ahora, fin de periodo).
        """
        package = await self.packages.get_purchasable_package(request.package_id)
        if request.checkout_session_id:
            await self._ensure_checkout_session(request.checkout_session_id, package, request.billing_cycle)
        price = resolve_cycle_price(package, request.billing_cycle)
        start_date = utcnow()

        purchase, created = await self.repo.create_or_get_existing(
            self.session,
            package_id=package.id,
            user_id=request.user_id,
            billing_cycle=request.billing_cycle.value,
            price=price,
            status=PurchaseStatus.PENDING.value,
            payment_method=request.payment_method.value,
            customer_email=request.customer_email,
            customer_name=request.customer_name,
            start_date=start_date,
            end_date=calculate_period_end(start_date, request.billing_cycle),
            is_recurring=request.is_recurring,
            metadata_json=request.metadata or {},
            checkout_session_id=request.checkout_session_id,
            idempotency_key=request.idempotency_key,
        )
        await self.session.commit()
        if created:
            logger.info(
                "Purchase created: id=%s user=%s package=%s cycle=%s price=%s",
                purchase.id, purchase.user_id, package.id, purchase.billing_cycle, price,
            )
        return purchase

    async def _ensure_checkout_session(self, session_id: str, package: Package, cycle: BillingCycle) -> None:
        """La sesión de origen debe existir, seguir vigente y ser del mismo paquete y ciclo."""
        checkout_session = await self.checkout_sessions.get_by_session_id(self.session, session_id)
        if checkout_session is None:
            raise CheckoutSessionNotFound(session_id)
        if checkout_session.status != CheckoutSessionStatus.PENDING.value or checkout_session.is_overdue(utcnow()):
            raise CheckoutSessionNotPending(session_id, checkout_session.status)
        if checkout_session.package_id != package.id or checkout_session.billing_cycle != cycle.value:
            raise CheckoutSessionMismatch(session_id)

    # -------------------------------------------------------------
    # Lecturas
    # -------------------------------------------------------------
    async def get(self, purchase_id: str) -> Purchase:
        purchase = await self.repo.get(self.session, purchase_id)
        if purchase is None:
            raise PurchaseNotFound(purchase_id)
        return purchase

    async def list_all(self) -> Sequence[Purchase]:
        return await self.repo.list_all(self.session)

    async def list_by_user(self, user_id: str) -> Sequence[Purchase]:
        return await self.repo.list_by_user(self.session, user_id)

    async def list_active(self, user_id: str) -> Sequence[Purchase]:
        return await self.repo.list_active(self.session, user_id, utcnow())

    async def expiring(self, days: int = 7) -> Sequence[Purchase]:
        now = utcnow()
        return await self.repo.list_expiring(self.session, now, now + timedelta(days=days))

    async def stats(self, user_id: Optional[str] = None) -> PurchaseStats:
        purchases = await self.repo.list_for_stats(self.session, user_id)
        now = utcnow()
        completed = [p for p in purchases if p.status == PurchaseStatus.COMPLETED.value]
        return PurchaseStats(
            total=len(purchases),
            active=sum(1 for p in completed if p.end_date > now),
            expired=sum(1 for p in completed if p.end_date <= now),
            total_spent=round(sum(float(p.price) for p in completed), 2),
        )

    # -------------------------------------------------------------
    # Transiciones
    # -------------------------------------------------------------
    async def _transition(self, purchase_id: str, to_status: PurchaseStatus, **changes) -> Purchase:
        purchase = await self.get(purchase_id)
        ensure_transition(purchase.status, to_status)
        purchase.status = to_status.value
        for key, value in changes.items():
            setattr(purchase, key, value)
        await self.session.commit()
        logger.info("Purchase %s → %s", purchase_id, to_status.value)
        return purchase

    async def complete(self, purchase_id: str, payment_id: str) -> Purchase:
        """pending → completed; la sesión de checkout de origen pasa a completed en la misma transacción."""
        purchase = await self.get(purchase_id)
        ensure_transition(purchase.status, PurchaseStatus.COMPLETED)
        purchase.status = PurchaseStatus.COMPLETED.value
        purchase.payment_id = payment_id
        if purchase.checkout_session_id:
            await self.checkout_sessions.mark_completed(self.session, purchase.checkout_session_id)
        await self.session.commit()
        logger.info("Purchase %s → completed (payment=%s)", purchase_id, payment_id)
        return purchase

    async def cancel(self, purchase_id: str) -> Purchase:
        return await self._transition(purchase_id, PurchaseStatus.CANCELLED)

    async def refund(self, purchase_id: str) -> Purchase:
        return await self._transition(purchase_id, PurchaseStatus.REFUNDED)

    async def renew(self, purchase_id: str) -> Purchase:
        """Extiende end_date un ciclo. Solo compras activas."""
        purchase = await self.get(purchase_id)
        if not is_active(purchase):
            raise BusinessRuleViolation("Cannot renew expired or inactive purchase")
        purchase.end_date = calculate_period_end(purchase.end_date, purchase.billing_cycle)
        await self.session.commit()
        return purchase

    async def extend(self, purchase_id: str, days: int) -> Purchase:
        if days <= 0:
            raise BusinessRuleViolation("Days must be greater than 0")
        purchase = await self.get(purchase_id)
        if purchase.status != PurchaseStatus.COMPLETED.value:
            raise BusinessRuleViolation("Can only extend completed purchases")
        purchase.end_date = purchase.end_date + timedelta(days=days)
        await self.session.commit()
        return purchase

    async def expire_for_sessions(self, session_ids: Sequence[str]) -> int:
        """Expira las compras pending de sesiones de checkout expiradas. No hace commit."""
        return await self.repo.expire_pending_for_sessions(self.session, session_ids)


__all__ = ["PurchaseService"]

# Fin del archivo storefront/modules/purchases/service.py
