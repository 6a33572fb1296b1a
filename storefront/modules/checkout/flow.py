# -*- coding: utf-8 -*-
"""
storefront/modules/checkout/flow.py

Orquestación del lado cliente: crear sesión y hacer el handoff al proveedor.

Dos llamadas secuenciales, sin compensación: si falla la segunda, la
sesión queda pending hasta que expire.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from storefront.modules.packages.enums import BillingCycle

from .client import CheckoutClient
from .schemas import BuyerDetails

logger = logging.getLogger(__name__)


@dataclass
class CheckoutHandoff:
    session_id: str
    checkout_url: str
    redirect_url: str


async def start_checkout(
    client: CheckoutClient,
    *,
    package_id: str,
    billing_cycle: Union[BillingCycle, str],
    buyer: BuyerDetails,
    custom_amount: Optional[float] = None,
    metadata: Optional[dict[str, Any]] = None,
    idempotency_key: Optional[str] = None,
) -> CheckoutHandoff:
    """
    Raises:
        RequestError: con el mensaje del backend, en cualquiera de los dos pasos
    """
    created = await client.create_session(
        package_id=package_id,
        billing_cycle=billing_cycle,
        buyer=buyer,
        custom_amount=custom_amount,
        metadata=metadata,
        idempotency_key=idempotency_key,
    )
    logger.debug("Checkout session %s created, requesting provider link", created.session_id)

    link = await client.attach_provider_checkout(created.session_id, buyer)
    return CheckoutHandoff(
        session_id=created.session_id,
        checkout_url=created.checkout_url,
        redirect_url=link.url,
    )


__all__ = ["CheckoutHandoff", "start_checkout"]

# Fin del archivo storefront/modules/checkout/flow.py
