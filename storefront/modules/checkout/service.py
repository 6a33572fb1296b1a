# -*- coding: utf-8 -*-
"""
storefront/modules/checkout/service.py

Ciclo de vida de la sesión de checkout (backend de referencia).

    create_session ─► pending ─┬─► completed   (confirmación del proveedor)
                               └─► expired     (expires_at vencido)

- Una sesión completed/expired es inmutable.
- La expiración se aplica de forma perezosa al leer y en lote por el job.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional, Sequence

import stripe
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.modules.packages.pricing import platform_fee, resolve_cycle_price
from storefront.modules.packages.service import PackageService
from storefront.modules.purchases.repository import PurchaseRepository
from storefront.shared.config.settings_base import BaseAppSettings
from storefront.shared.database.base import utcnow

from .enums import CheckoutSessionStatus
from .errors import CheckoutSessionNotFound, CheckoutSessionNotPending, ProviderCheckoutFailed
from .models import CheckoutSession
from .providers.stripe_provider import CheckoutProvider, ProviderNotConfigured
from .repository import CheckoutSessionRepository
from .schemas import BuyerDetails, CheckoutSessionCreated, CreateCheckoutSessionRequest

logger = logging.getLogger(__name__)


class CheckoutService:

    def __init__(
        self,
        session: AsyncSession,
        settings: BaseAppSettings,
        provider: Optional[CheckoutProvider] = None,
    ):
        self.session = session
        self.settings = settings
        self.provider = provider
        self.repo = CheckoutSessionRepository()
        self.purchases = PurchaseRepository()
        self.packages = PackageService(session)

    def checkout_url(self, session_id: str) -> str:
        return f"{self.settings.frontend_url.rstrip('/')}/checkout/{session_id}"

    async def create_session(self, request: CreateCheckoutSessionRequest) -> CheckoutSessionCreated:
        """
        Crea una sesión pending para un paquete activo de una tienda con KYC.

        El precio es el de la tabla del paquete para el ciclo, salvo que se
        indique custom_amount.
        """
        package = await self.packages.get_purchasable_package(request.package_id)
        shop = await self.packages.get_chargeable_shop(package)

        price = resolve_cycle_price(package, request.billing_cycle)
        # 0 no sustituye al precio de tabla
        if request.custom_amount:
            price = request.custom_amount

        checkout_session, created = await self.repo.create_or_get_existing(
            self.session,
            package_id=package.id,
            shop_id=shop.id,
            billing_cycle=request.billing_cycle.value,
            price=price,
            platform_fee=platform_fee(price, shop.platform_fee_percent),
            email=request.email,
            name=request.name,
            custom_amount=request.custom_amount,
            metadata_json=request.metadata or {},
            idempotency_key=request.idempotency_key,
            expires_at=utcnow() + timedelta(hours=self.settings.checkout_session_ttl_hours),
        )
        await self.session.commit()

        if created:
            logger.info(
                "Checkout session created: session_id=%s package=%s cycle=%s price=%s",
                checkout_session.session_id, package.id, request.billing_cycle.value, price,
            )
        return CheckoutSessionCreated(
            session_id=checkout_session.session_id,
            checkout_url=self.checkout_url(checkout_session.session_id),
        )

    async def get_session(self, session_id: str) -> CheckoutSession:
        """
        Sesión por id público; si está vencida y pending pasa a expired
        junto con las compras pending que originó.
        """
        checkout_session = await self.repo.get_by_session_id(self.session, session_id)
        if checkout_session is None:
            raise CheckoutSessionNotFound(session_id)

        if checkout_session.is_overdue(utcnow()):
            checkout_session.status = CheckoutSessionStatus.EXPIRED.value
            await self.purchases.expire_pending_for_sessions(self.session, [session_id])
            await self.session.commit()
            logger.info("Checkout session expired on read: %s", session_id)

        return checkout_session

    async def _get_pending(self, session_id: str) -> CheckoutSession:
        checkout_session = await self.get_session(session_id)
        if checkout_session.status != CheckoutSessionStatus.PENDING.value:
            raise CheckoutSessionNotPending(session_id, checkout_session.status)
        return checkout_session

    async def create_provider_checkout(self, session_id: str, buyer: BuyerDetails) -> str:
        """
        Handoff al proveedor: adjunta datos del comprador, crea la sesión
        del proveedor, guarda su id y devuelve la URL de redirección.
        """
        checkout_session = await self._get_pending(session_id)
        package = await self.packages.get_package(checkout_session.package_id)
        shop = await self.packages.get_chargeable_shop(package)

        if buyer.email:
            checkout_session.email = buyer.email
        if buyer.name:
            checkout_session.name = buyer.name

        if self.provider is None:
            raise ProviderCheckoutFailed("no payment provider configured")

        frontend = self.settings.frontend_url.rstrip("/")
        try:
            result = await self.provider.create_checkout_session(
                checkout_session=checkout_session,
                package=package,
                shop=shop,
                success_url=f"{frontend}/success?session_id={{CHECKOUT_SESSION_ID}}",
                cancel_url=self.checkout_url(session_id),
                customer_email=checkout_session.email,
            )
        except (stripe.StripeError, ProviderNotConfigured) as e:
            reason = getattr(e, "user_message", None) or str(e)
            logger.warning("Provider checkout failed: session_id=%s reason=%s", session_id, reason)
            await self.session.rollback()
            raise ProviderCheckoutFailed(reason) from e

        checkout_session.stripe_checkout_session_id = result.session_id
        await self.session.commit()
        return result.checkout_url

    async def mark_session_completed(self, session_id: str) -> CheckoutSession:
        """pending → completed. Falla si la sesión ya es final."""
        checkout_session = await self._get_pending(session_id)
        checkout_session.status = CheckoutSessionStatus.COMPLETED.value
        await self.session.commit()
        logger.info("Checkout session completed: %s", session_id)
        return checkout_session

    async def expire_sessions(self, now: Optional[datetime] = None) -> Sequence[str]:
        """
        Expira en lote las sesiones pending vencidas. No hace commit.
        Una sesión completada entre la lectura y el update no se reporta.

        Returns:
            session_id públicos expirados
        """
        overdue = await self.repo.list_overdue_ids(self.session, now or utcnow())
        return await self.repo.mark_expired(self.session, overdue)


__all__ = ["CheckoutService"]

# Fin del archivo storefront/modules/checkout/service.py
