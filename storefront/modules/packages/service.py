# -*- coding: utf-8 -*-
"""
storefront/modules/packages/service.py

Servicio del catálogo: lectura de paquetes y validaciones de compra.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

from sqlalchemy.ext.asyncio import AsyncSession

from .enums import BillingCycle
from .errors import PackageInactive, PackageNotFound, ShopNotFound, ShopNotReady
from .models import Package, Shop
from .pricing import resolve_cycle_price
from .repository import PackageRepository, ShopRepository

logger = logging.getLogger(__name__)


class PackageService:

    def __init__(self, session: AsyncSession):
        self.session = session
        self.packages = PackageRepository()
        self.shops = ShopRepository()

    async def list_packages(self) -> Sequence[Package]:
        return await self.packages.list_active(self.session)

    async def popular_packages(self, limit: int = 5) -> Sequence[Package]:
        # Sin métrica de ventas: los más recientes activos
        return await self.packages.list_active(self.session, limit=limit)

    async def search_packages(self, query: str) -> Sequence[Package]:
        return await self.packages.search(self.session, query)

    async def get_package(self, package_id: str) -> Package:
        package = await self.packages.get(self.session, package_id)
        if package is None:
            raise PackageNotFound(package_id)
        return package

    async def get_purchasable_package(self, package_id: str) -> Package:
        """Paquete existente y activo; si no, PackageNotFound / PackageInactive."""
        package = await self.packages.get(self.session, package_id)
        if package is None:
            raise PackageNotFound(package_id, "Package not found")
        if not package.is_active:
            raise PackageInactive(package_id)
        return package

    async def get_price(self, package_id: str, cycle: Union[BillingCycle, str]) -> float:
        package = await self.get_package(package_id)
        return resolve_cycle_price(package, cycle)

    async def get_chargeable_shop(self, package: Package) -> Shop:
        """Tienda del paquete con cargos habilitados (KYC completo)."""
        shop = await self.shops.get(self.session, package.shop_id) if package.shop_id else None
        if shop is None:
            raise ShopNotFound(package.shop_id)
        if not shop.stripe_charges_enabled:
            logger.info("Shop %s rejected checkout: charges not enabled", shop.id)
            raise ShopNotReady(shop.id)
        return shop


__all__ = ["PackageService"]

# Fin del archivo storefront/modules/packages/service.py
