# -*- coding: utf-8 -*-
"""
tests/modules/checkout/test_checkout_flow.py

Flujo cliente completo: crear sesión y handoff al proveedor.

Autor: Storefront
Fecha: 2026-09-14
"""

import pytest

from storefront.modules.checkout.client import CheckoutClient
from storefront.modules.checkout.enums import CheckoutSessionStatus
from storefront.modules.checkout.flow import start_checkout
from storefront.modules.checkout.schemas import BuyerDetails
from storefront.shared.http.errors import ValidationFailure

pytestmark = pytest.mark.anyio


async def test_start_checkout_returns_redirect(api, seeded, fake_provider):
    client = CheckoutClient(http_client=api)
    buyer = BuyerDetails(email="buyer@example.com", name="Ada Buyer")

    handoff = await start_checkout(client, package_id="P1", billing_cycle="yearly", buyer=buyer)

    assert handoff.redirect_url == "https://checkout.stripe.test/c/pay/cs_test_1"
    assert handoff.checkout_url.endswith(f"/checkout/{handoff.session_id}")

    session = await client.get_session(handoff.session_id)
    assert session.price == 299.99
    assert session.stripe_checkout_session_id == "cs_test_1"
    assert fake_provider.calls[0]["customer_email"] == "buyer@example.com"


async def test_provider_failure_leaves_session_pending(api, seeded, fake_provider, stripe_declined):
    client = CheckoutClient(http_client=api)
    fake_provider.error = stripe_declined

    with pytest.raises(ValidationFailure) as exc_info:
        await start_checkout(
            client, package_id="P1", billing_cycle="monthly", buyer=BuyerDetails(), idempotency_key="cart-1",
        )
    assert exc_info.value.message == "Failed to create Stripe checkout: Your card was declined."

    # Sin compensación: la sesión creada en el primer paso sigue pending
    again = await client.create_session(package_id="P1", billing_cycle="monthly", idempotency_key="cart-1")
    session = await client.get_session(again.session_id)
    assert session.status is CheckoutSessionStatus.PENDING


async def test_first_step_failure_skips_provider(api, seeded, fake_provider):
    client = CheckoutClient(http_client=api)

    with pytest.raises(ValidationFailure):
        await start_checkout(client, package_id="P-NOKYC", billing_cycle="monthly", buyer=BuyerDetails())
    assert fake_provider.calls == []
