# -*- coding: utf-8 -*-
"""
storefront/modules/checkout/client.py

Binding de cliente para los endpoints del checkout.

Sin estado, sin caché, sin reintentos. Dos llamadas iguales a
create_session crean dos sesiones salvo que se pase idempotency_key.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from storefront.modules.packages.enums import BillingCycle
from storefront.shared.http.api_client import ApiClient, quote_segment
from storefront.shared.http.errors import RequestError

from .schemas import (
    BuyerDetails,
    CheckoutSessionCreated,
    CheckoutSessionOut,
    ProviderCheckoutLink,
)

logger = logging.getLogger(__name__)


class CheckoutClient(ApiClient):

    async def get_session(self, session_id: str) -> Optional[CheckoutSessionOut]:
        """
        Sesión por id público.

        Devuelve None tanto si no existe como si la llamada falla por
        cualquier otro motivo (el fallo queda en el log): para el llamador
        "no disponible" y "no encontrada" son lo mismo.
        """
        try:
            data = await self._request(
                "GET",
                f"/checkout/session/{quote_segment(session_id)}",
                fallback_message="Failed to get checkout session",
            )
        except RequestError as e:
            logger.warning("Checkout session %s unavailable: %s", session_id, e.message)
            return None
        if data is None:
            return None
        return CheckoutSessionOut.model_validate(data)

    async def create_session(
        self,
        *,
        package_id: str,
        billing_cycle: Union[BillingCycle, str],
        buyer: Optional[BuyerDetails] = None,
        custom_amount: Optional[float] = None,
        metadata: Optional[dict[str, Any]] = None,
        idempotency_key: Optional[str] = None,
    ) -> CheckoutSessionCreated:
        buyer = buyer or BuyerDetails()
        # Sin validación local: el backend es quien rechaza (y su mensaje llega al llamador)
        payload = {
            "packageId": package_id,
            "billingCycle": billing_cycle.value if isinstance(billing_cycle, BillingCycle) else billing_cycle,
            "email": buyer.email,
            "name": buyer.name,
            "customAmount": custom_amount,
            "metadata": metadata,
            "idempotencyKey": idempotency_key,
        }
        data = await self._request(
            "POST",
            "/checkout/create-session",
            json={k: v for k, v in payload.items() if v is not None},
            fallback_message="Failed to create checkout session",
        )
        return CheckoutSessionCreated.model_validate(data)

    async def attach_provider_checkout(self, session_id: str, buyer: BuyerDetails) -> ProviderCheckoutLink:
        data = await self._request(
            "POST",
            f"/checkout/{quote_segment(session_id)}/stripe",
            json=buyer.to_wire(),
            fallback_message="Failed to create Stripe checkout",
        )
        return ProviderCheckoutLink.model_validate(data)


__all__ = ["CheckoutClient"]

# Fin del archivo storefront/modules/checkout/client.py
