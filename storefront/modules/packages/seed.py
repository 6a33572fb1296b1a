# -*- coding: utf-8 -*-
"""
storefront/modules/packages/seed.py

Datos de ejemplo para desarrollo: una tienda con KYC completo y tres
paquetes. Idempotente (busca por slug / nombre antes de crear).

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from .models import Package, Shop
from .repository import PackageRepository, ShopRepository

logger = logging.getLogger(__name__)

SAMPLE_SHOP = {
    "name": "Demo Digital Shop",
    "slug": "demo-digital-shop",
    "owner_id": "demo-owner",
    "email": "shop@example.com",
    "description": "Sample shop for local development",
    "stripe_account_id": "acct_demo",
    "stripe_charges_enabled": True,
    "platform_fee_percent": 15.0,
}

SAMPLE_PACKAGES = [
    {
        "name": "Starter Digital Pack",
        "slug": "starter-digital-pack",
        "description": "Perfect for individuals just starting their digital journey",
        "base_price": 29.99,
        "weekly_price": 9.99,
        "monthly_price": 29.99,
        "yearly_price": 299.99,
        "features": [
            "Basic digital tools",
            "Email support",
            "1GB cloud storage",
            "Access to templates",
        ],
        "images": ["https://via.placeholder.com/300x200/4F46E5/FFFFFF?text=Starter"],
    },
    {
        "name": "Professional Digital Suite",
        "slug": "professional-digital-suite",
        "description": "Complete digital toolkit for professionals and small businesses",
        "base_price": 99.99,
        "weekly_price": 29.99,
        "monthly_price": 99.99,
        "yearly_price": 999.99,
        "features": [
            "Advanced digital tools",
            "Priority support",
            "50GB cloud storage",
            "Premium templates",
            "Analytics dashboard",
            "Team collaboration",
        ],
        "images": ["https://via.placeholder.com/300x200/10B981/FFFFFF?text=Professional"],
    },
    {
        "name": "Enterprise Digital Platform",
        "slug": "enterprise-digital-platform",
        "description": "Enterprise-grade digital solution for large organizations",
        "base_price": 299.99,
        "weekly_price": 89.99,
        "monthly_price": 299.99,
        "yearly_price": 2999.99,
        "features": [
            "All Professional features",
            "Unlimited cloud storage",
            "Dedicated support",
            "Custom integrations",
            "Advanced analytics",
            "SLA guarantee",
            "Custom training",
            "API access",
        ],
        "images": ["https://via.placeholder.com/300x200/8B5CF6/FFFFFF?text=Enterprise"],
    },
]


async def seed_sample_data(session: AsyncSession) -> list[Package]:
    """Crea (si faltan) la tienda y los paquetes de ejemplo. Hace commit."""
    shops = ShopRepository()
    packages = PackageRepository()

    shop = await shops.get_by_slug(session, SAMPLE_SHOP["slug"])
    if shop is None:
        shop = Shop(**SAMPLE_SHOP)
        session.add(shop)
        await session.flush()

    result: list[Package] = []
    created = 0
    for data in SAMPLE_PACKAGES:
        existing = await packages.get_by_name(session, data["name"])
        if existing is not None:
            result.append(existing)
            continue
        package = Package(
            shop_id=shop.id,
            is_subscription=True,
            is_active=True,
            **data,
        )
        session.add(package)
        result.append(package)
        created += 1

    await session.commit()
    logger.info("Sample data ready: %d packages (%d created)", len(result), created)
    return result


__all__ = ["seed_sample_data", "SAMPLE_PACKAGES", "SAMPLE_SHOP"]

# Fin del archivo storefront/modules/packages/seed.py
