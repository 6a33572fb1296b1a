# -*- coding: utf-8 -*-
"""
storefront/modules/checkout/providers/stripe_provider.py

Proveedor Stripe para el handoff de una sesión de checkout.

Crea una Stripe Checkout Session en modo suscripción con Stripe Connect
(comisión de plataforma + transferencia a la cuenta conectada de la tienda).

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import stripe
from fastapi.concurrency import run_in_threadpool

from storefront.modules.packages.enums import BillingCycle
from storefront.modules.packages.models import Package, Shop

from ..models import CheckoutSession

logger = logging.getLogger(__name__)

STRIPE_INTERVALS = {
    BillingCycle.WEEKLY: "week",
    BillingCycle.MONTHLY: "month",
    BillingCycle.YEARLY: "year",
}


class ProviderNotConfigured(Exception):
    """El proveedor no tiene credenciales configuradas."""


@dataclass
class ProviderSessionResult:
    """Resultado de crear la sesión del proveedor."""
    checkout_url: str
    session_id: str
    provider: str = "stripe"


class CheckoutProvider(Protocol):
    async def create_checkout_session(
        self,
        *,
        checkout_session: CheckoutSession,
        package: Package,
        shop: Shop,
        success_url: str,
        cancel_url: str,
        customer_email: Optional[str] = None,
    ) -> ProviderSessionResult:
        ...


def build_session_params(
    *,
    checkout_session: CheckoutSession,
    package: Package,
    shop: Shop,
    success_url: str,
    cancel_url: str,
    currency: str,
    customer_email: Optional[str] = None,
) -> dict:
    """Parámetros de stripe.checkout.Session.create para una sesión pendiente."""
    cycle = BillingCycle(checkout_session.billing_cycle)

    product_data: dict = {"name": package.name}
    if package.description:
        product_data["description"] = package.description
    if package.images:
        product_data["images"] = list(package.images)

    line_item = {
        "price_data": {
            "currency": currency.lower(),
            "product_data": product_data,
            "unit_amount": round(checkout_session.price * 100),
            "recurring": {"interval": STRIPE_INTERVALS[cycle]},
        },
        "quantity": 1,
    }

    # Metadata para el webhook
    metadata = {
        "checkoutSessionId": checkout_session.session_id,
        "packageId": package.id,
        "shopId": shop.id,
    }

    subscription_data: dict = {
        "application_fee_percent": float(shop.platform_fee_percent),
        "metadata": metadata,
    }
    if shop.stripe_account_id:
        subscription_data["transfer_data"] = {"destination": shop.stripe_account_id}
    if package.trial_days:
        subscription_data["trial_period_days"] = package.trial_days

    params = {
        "mode": "subscription",
        "payment_method_types": ["card"],
        "line_items": [line_item],
        "success_url": success_url,
        "cancel_url": cancel_url,
        "metadata": metadata,
        "client_reference_id": checkout_session.session_id,
        "subscription_data": subscription_data,
    }
    if customer_email:
        params["customer_email"] = customer_email
    return params


class StripeProvider:
    """Proveedor de pagos Stripe para sesiones de checkout."""

    def __init__(self, secret_key: Optional[str] = None, currency: str = "usd"):
        self._secret_key = secret_key
        self._currency = currency
        if not self._secret_key:
            logger.warning("STRIPE_SECRET_KEY not configured")

    @property
    def is_configured(self) -> bool:
        return bool(self._secret_key)

    async def create_checkout_session(
        self,
        *,
        checkout_session: CheckoutSession,
        package: Package,
        shop: Shop,
        success_url: str,
        cancel_url: str,
        customer_email: Optional[str] = None,
    ) -> ProviderSessionResult:
        """
        Crea la Stripe Checkout Session.

        Raises:
            stripe.StripeError: Si Stripe rechaza la llamada
            ProviderNotConfigured: Si no hay secret key
        """
        if not self.is_configured:
            raise ProviderNotConfigured("Stripe is not configured. Set STRIPE_SECRET_KEY.")

        params = build_session_params(
            checkout_session=checkout_session,
            package=package,
            shop=shop,
            success_url=success_url,
            cancel_url=cancel_url,
            currency=self._currency,
            customer_email=customer_email,
        )

        logger.info(
            "Creating Stripe checkout session: checkout_session=%s package=%s shop=%s",
            checkout_session.session_id, package.id, shop.id,
        )

        # Ejecutar en threadpool para no bloquear el event loop
        session = await run_in_threadpool(stripe.checkout.Session.create, api_key=self._secret_key, **params)

        logger.info(
            "Stripe checkout session created: stripe_session=%s checkout_session=%s",
            session.id, checkout_session.session_id,
        )
        return ProviderSessionResult(checkout_url=session.url, session_id=session.id)


__all__ = [
    "StripeProvider",
    "CheckoutProvider",
    "ProviderSessionResult",
    "ProviderNotConfigured",
    "build_session_params",
    "STRIPE_INTERVALS",
]

# Fin del archivo storefront/modules/checkout/providers/stripe_provider.py
