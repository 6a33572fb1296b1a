# -*- coding: utf-8 -*-
"""
storefront/modules/purchases/routes.py

Rutas de compras.

Endpoints:
- POST  /purchases
- GET   /purchases
- GET   /purchases/user/{user_id}
- GET   /purchases/user/{user_id}/active
- GET   /purchases/expiring?days=
- GET   /purchases/stats?userId=
- GET   /purchases/{purchase_id}
- PATCH /purchases/{purchase_id}/complete   body {paymentId}
- PATCH /purchases/{purchase_id}/cancel
- PATCH /purchases/{purchase_id}/refund
- PATCH /purchases/{purchase_id}/renew
- PATCH /purchases/{purchase_id}/extend     body {days}

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.shared.database.database import get_async_session

from .schemas import (
    CompletePurchaseRequest,
    CreatePurchaseRequest,
    ExtendPurchaseRequest,
    PurchaseOut,
    PurchaseStats,
)
from .service import PurchaseService

router = APIRouter(prefix="/purchases", tags=["purchases"])


def get_purchase_service(session: AsyncSession = Depends(get_async_session)) -> PurchaseService:
    return PurchaseService(session)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PurchaseOut)
async def create_purchase(
    body: CreatePurchaseRequest,
    service: PurchaseService = Depends(get_purchase_service),
):
    return await service.create(body)


@router.get("", response_model=list[PurchaseOut])
async def list_purchases(service: PurchaseService = Depends(get_purchase_service)):
    return await service.list_all()


@router.get("/user/{user_id}", response_model=list[PurchaseOut])
async def get_user_purchases(user_id: str, service: PurchaseService = Depends(get_purchase_service)):
    return await service.list_by_user(user_id)


@router.get("/user/{user_id}/active", response_model=list[PurchaseOut])
async def get_active_purchases(user_id: str, service: PurchaseService = Depends(get_purchase_service)):
    return await service.list_active(user_id)


@router.get("/expiring", response_model=list[PurchaseOut])
async def get_expiring_purchases(
    days: int = Query(7, ge=0),
    service: PurchaseService = Depends(get_purchase_service),
):
    return await service.expiring(days)


@router.get("/stats", response_model=PurchaseStats)
async def get_purchase_stats(
    user_id: Optional[str] = Query(None, alias="userId"),
    service: PurchaseService = Depends(get_purchase_service),
):
    return await service.stats(user_id)


@router.get("/{purchase_id}", response_model=PurchaseOut)
async def get_purchase(purchase_id: str, service: PurchaseService = Depends(get_purchase_service)):
    return await service.get(purchase_id)


@router.patch("/{purchase_id}/complete", response_model=PurchaseOut)
async def complete_purchase(
    purchase_id: str,
    body: CompletePurchaseRequest,
    service: PurchaseService = Depends(get_purchase_service),
):
    return await service.complete(purchase_id, body.payment_id)


@router.patch("/{purchase_id}/cancel", response_model=PurchaseOut)
async def cancel_purchase(purchase_id: str, service: PurchaseService = Depends(get_purchase_service)):
    return await service.cancel(purchase_id)


@router.patch("/{purchase_id}/refund", response_model=PurchaseOut)
async def refund_purchase(purchase_id: str, service: PurchaseService = Depends(get_purchase_service)):
    return await service.refund(purchase_id)


@router.patch("/{purchase_id}/renew", response_model=PurchaseOut)
async def renew_purchase(purchase_id: str, service: PurchaseService = Depends(get_purchase_service)):
    return await service.renew(purchase_id)


@router.patch("/{purchase_id}/extend", response_model=PurchaseOut)
async def extend_purchase(
    purchase_id: str,
    body: ExtendPurchaseRequest,
    service: PurchaseService = Depends(get_purchase_service),
):
    return await service.extend(purchase_id, body.days)


__all__ = ["router", "get_purchase_service"]

# Fin del archivo storefront/modules/purchases/routes.py
