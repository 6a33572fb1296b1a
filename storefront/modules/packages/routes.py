# -*- coding: utf-8 -*-
"""
storefront/modules/packages/routes.py

Rutas del catálogo.

Endpoints:
- GET  /packages
- GET  /packages/search?q=
- GET  /packages/popular?limit=
- POST /packages/seed
- GET  /packages/{package_id}
- GET  /packages/{package_id}/price/{cycle}

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.shared.database.database import get_async_session

from .enums import BillingCycle
from .schemas import PackageOut, PriceQuote
from .seed import seed_sample_data
from .service import PackageService

router = APIRouter(prefix="/packages", tags=["packages"])


def get_package_service(session: AsyncSession = Depends(get_async_session)) -> PackageService:
    return PackageService(session)


@router.get("", response_model=list[PackageOut], response_model_by_alias=True)
async def list_packages(service: PackageService = Depends(get_package_service)):
    return await service.list_packages()


@router.get("/search", response_model=list[PackageOut], response_model_by_alias=True)
async def search_packages(
    q: str = Query(..., min_length=1),
    service: PackageService = Depends(get_package_service),
):
    return await service.search_packages(q)


@router.get("/popular", response_model=list[PackageOut], response_model_by_alias=True)
async def popular_packages(
    limit: int = Query(5, ge=1, le=100),
    service: PackageService = Depends(get_package_service),
):
    return await service.popular_packages(limit)


@router.post(
    "/seed",
    status_code=status.HTTP_201_CREATED,
    response_model=list[PackageOut],
    response_model_by_alias=True,
    summary="Crear paquetes de ejemplo (desarrollo)",
)
async def seed_packages(session: AsyncSession = Depends(get_async_session)):
    return await seed_sample_data(session)


@router.get("/{package_id}", response_model=PackageOut, response_model_by_alias=True)
async def get_package(package_id: str, service: PackageService = Depends(get_package_service)):
    return await service.get_package(package_id)


@router.get("/{package_id}/price/{cycle}", response_model=PriceQuote, response_model_by_alias=True)
async def get_package_price(
    package_id: str,
    cycle: BillingCycle,
    service: PackageService = Depends(get_package_service),
):
    price = await service.get_price(package_id, cycle)
    return PriceQuote(price=price)


__all__ = ["router", "get_package_service"]

# Fin del archivo storefront/modules/packages/routes.py
