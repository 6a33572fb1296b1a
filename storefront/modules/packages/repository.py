# -*- coding: utf-8 -*-
"""
storefront/modules/packages/repository.py

Repositorios del catálogo (paquetes y tiendas).

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.shared.database.repository import BaseRepository

from .models import Package, Shop


class PackageRepository(BaseRepository[Package]):

    def __init__(self):
        super().__init__(Package)

    async def list_active(self, session: AsyncSession, limit: Optional[int] = None) -> Sequence[Package]:
        """Paquetes activos, más recientes primero."""
        stmt = (
            select(Package)
            .where(Package.is_active.is_(True))
            .order_by(Package.created_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def search(self, session: AsyncSession, query: str) -> Sequence[Package]:
        """Búsqueda case-insensitive por nombre o descripción, ordenada por nombre."""
        pattern = f"%{query}%"
        stmt = (
            select(Package)
            .where(
                Package.is_active.is_(True),
                or_(Package.name.ilike(pattern), Package.description.ilike(pattern)),
            )
            .order_by(Package.name.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_name(self, session: AsyncSession, name: str) -> Optional[Package]:
        result = await session.execute(select(Package).where(Package.name == name))
        return result.scalars().first()


class ShopRepository(BaseRepository[Shop]):

    def __init__(self):
        super().__init__(Shop)

    async def get_by_slug(self, session: AsyncSession, slug: str) -> Optional[Shop]:
        result = await session.execute(select(Shop).where(Shop.slug == slug))
        return result.scalar_one_or_none()


__all__ = ["PackageRepository", "ShopRepository"]

# Fin del archivo storefront/modules/packages/repository.py
