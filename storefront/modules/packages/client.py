# -*- coding: utf-8 -*-
"""
storefront/modules/packages/client.py

Binding de cliente para los endpoints del catálogo.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

from typing import Union

from storefront.shared.http.api_client import ApiClient, quote_segment

from .enums import BillingCycle
from .schemas import PackageOut, PriceQuote


class PackageClient(ApiClient):
    """Lecturas del catálogo. Fallos → RequestError con el mensaje del backend."""

    async def list_packages(self) -> list[PackageOut]:
        data = await self._request("GET", "/packages", fallback_message="Failed to get packages")
        return [PackageOut.model_validate(item) for item in data or []]

    async def get_package(self, package_id: str) -> PackageOut:
        data = await self._request(
            "GET",
            f"/packages/{quote_segment(package_id)}",
            fallback_message="Failed to get package",
        )
        return PackageOut.model_validate(data)

    async def get_price(self, package_id: str, billing_cycle: Union[BillingCycle, str]) -> PriceQuote:
        cycle = billing_cycle.value if isinstance(billing_cycle, BillingCycle) else billing_cycle
        data = await self._request(
            "GET",
            f"/packages/{quote_segment(package_id)}/price/{quote_segment(cycle)}",
            fallback_message="Failed to get package price",
        )
        return PriceQuote.model_validate(data)

    async def search_packages(self, query: str) -> list[PackageOut]:
        data = await self._request(
            "GET",
            "/packages/search",
            params={"q": query},
            fallback_message="Failed to search packages",
        )
        return [PackageOut.model_validate(item) for item in data or []]

    async def get_popular_packages(self, limit: int = 5) -> list[PackageOut]:
        data = await self._request(
            "GET",
            "/packages/popular",
            params={"limit": limit},
            fallback_message="Failed to get popular packages",
        )
        return [PackageOut.model_validate(item) for item in data or []]


__all__ = ["PackageClient"]

# Fin del archivo storefront/modules/packages/client.py
