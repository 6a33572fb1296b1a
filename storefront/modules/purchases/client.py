# -*- coding: utf-8 -*-
"""
storefront/modules/purchases/client.py

Binding de cliente para los endpoints de compras.

Todo fallo se re-lanza como RequestError con el `message` del backend
o, si no lo hay, con el mensaje genérico de la operación.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from storefront.shared.http.api_client import ApiClient, quote_segment

from .schemas import CreatePurchaseRequest, PurchaseOut, PurchaseStats


class PurchaseClient(ApiClient):

    async def create_purchase(self, request: Union[CreatePurchaseRequest, Mapping[str, Any]]) -> PurchaseOut:
        """
        Crea una compra (pending). `request` puede ser el modelo o un dict
        camelCase/snake_case; la validación la hace el backend.
        """
        if isinstance(request, CreatePurchaseRequest):
            payload = request.to_wire()
        else:
            payload = dict(request)
        data = await self._request("POST", "/purchases", json=payload, fallback_message="Failed to create purchase")
        return PurchaseOut.model_validate(data)

    async def complete_purchase(self, purchase_id: str, payment_id: str) -> PurchaseOut:
        data = await self._request(
            "PATCH",
            f"/purchases/{quote_segment(purchase_id)}/complete",
            json={"paymentId": payment_id},
            fallback_message="Failed to complete purchase",
        )
        return PurchaseOut.model_validate(data)

    async def cancel_purchase(self, purchase_id: str) -> PurchaseOut:
        data = await self._request(
            "PATCH",
            f"/purchases/{quote_segment(purchase_id)}/cancel",
            fallback_message="Failed to cancel purchase",
        )
        return PurchaseOut.model_validate(data)

    async def get_purchase(self, purchase_id: str) -> PurchaseOut:
        data = await self._request(
            "GET",
            f"/purchases/{quote_segment(purchase_id)}",
            fallback_message="Failed to get purchase",
        )
        return PurchaseOut.model_validate(data)

    async def get_user_purchases(self, user_id: str) -> list[PurchaseOut]:
        data = await self._request(
            "GET",
            f"/purchases/user/{quote_segment(user_id)}",
            fallback_message="Failed to get user purchases",
        )
        return [PurchaseOut.model_validate(item) for item in data or []]

    async def get_active_purchases(self, user_id: str) -> list[PurchaseOut]:
        data = await self._request(
            "GET",
            f"/purchases/user/{quote_segment(user_id)}/active",
            fallback_message="Failed to get active purchases",
        )
        return [PurchaseOut.model_validate(item) for item in data or []]

    async def refund_purchase(self, purchase_id: str) -> PurchaseOut:
        data = await self._request(
            "PATCH",
            f"/purchases/{quote_segment(purchase_id)}/refund",
            fallback_message="Failed to refund purchase",
        )
        return PurchaseOut.model_validate(data)

    async def renew_purchase(self, purchase_id: str) -> PurchaseOut:
        data = await self._request(
            "PATCH",
            f"/purchases/{quote_segment(purchase_id)}/renew",
            fallback_message="Failed to renew purchase",
        )
        return PurchaseOut.model_validate(data)

    async def extend_purchase(self, purchase_id: str, days: int) -> PurchaseOut:
        data = await self._request(
            "PATCH",
            f"/purchases/{quote_segment(purchase_id)}/extend",
            json={"days": days},
            fallback_message="Failed to extend purchase",
        )
        return PurchaseOut.model_validate(data)

    async def get_purchase_stats(self, user_id: Optional[str] = None) -> PurchaseStats:
        data = await self._request(
            "GET",
            "/purchases/stats",
            params={"userId": user_id} if user_id else None,
            fallback_message="Failed to get purchase stats",
        )
        return PurchaseStats.model_validate(data)

    async def get_expiring_purchases(self, days: int = 7) -> list[PurchaseOut]:
        data = await self._request(
            "GET",
            "/purchases/expiring",
            params={"days": days},
            fallback_message="Failed to get expiring purchases",
        )
        return [PurchaseOut.model_validate(item) for item in data or []]


__all__ = ["PurchaseClient"]

# Fin del archivo storefront/modules/purchases/client.py
