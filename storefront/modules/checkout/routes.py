# -*- coding: utf-8 -*-
"""
storefront/modules/checkout/routes.py

Rutas del checkout.

Endpoints:
- POST /checkout/create-session
- GET  /checkout/session/{session_id}
- POST /checkout/{session_id}/stripe

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.shared.config import get_settings
from storefront.shared.config.settings_base import BaseAppSettings
from storefront.shared.database.database import get_async_session

from .providers.stripe_provider import CheckoutProvider, StripeProvider
from .schemas import (
    BuyerDetails,
    CheckoutSessionCreated,
    CheckoutSessionOut,
    CreateCheckoutSessionRequest,
    ProviderCheckoutLink,
)
from .service import CheckoutService

router = APIRouter(prefix="/checkout", tags=["checkout"])


def get_checkout_provider() -> CheckoutProvider:
    settings = get_settings()
    key = settings.stripe_secret_key.get_secret_value() if settings.stripe_secret_key else None
    return StripeProvider(secret_key=key, currency=settings.stripe_currency)


def get_checkout_service(
    session: AsyncSession = Depends(get_async_session),
    settings: BaseAppSettings = Depends(get_settings),
    provider: CheckoutProvider = Depends(get_checkout_provider),
) -> CheckoutService:
    return CheckoutService(session, settings, provider)


@router.post(
    "/create-session",
    status_code=status.HTTP_201_CREATED,
    response_model=CheckoutSessionCreated,
    summary="Crear sesión de checkout",
)
async def create_session(
    body: CreateCheckoutSessionRequest,
    service: CheckoutService = Depends(get_checkout_service),
):
    return await service.create_session(body)


@router.get("/session/{session_id}", response_model=CheckoutSessionOut)
async def get_session(session_id: str, service: CheckoutService = Depends(get_checkout_service)):
    return await service.get_session(session_id)


@router.post(
    "/{session_id}/stripe",
    status_code=status.HTTP_200_OK,
    response_model=ProviderCheckoutLink,
    summary="Crear Stripe Checkout para la sesión",
)
async def create_stripe_checkout(
    session_id: str,
    body: BuyerDetails,
    service: CheckoutService = Depends(get_checkout_service),
):
    url = await service.create_provider_checkout(session_id, body)
    return ProviderCheckoutLink(url=url)


__all__ = ["router", "get_checkout_provider", "get_checkout_service"]

# Fin del archivo storefront/modules/checkout/routes.py
