# -*- coding: utf-8 -*-
"""
tests/modules/checkout/test_checkout_client.py

CheckoutClient contra el backend de referencia (ASGITransport) y contra
transportes simulados (httpx.MockTransport) para los fallos de red.

Autor: Storefront
Fecha: 2026-09-14
"""

import httpx
import pytest

from storefront.modules.checkout.client import CheckoutClient
from storefront.modules.checkout.enums import CheckoutSessionStatus
from storefront.modules.checkout.schemas import BuyerDetails
from storefront.modules.checkout.service import CheckoutService
from storefront.shared.config import get_settings
from storefront.shared.http.errors import NotFoundError, RequestError, ValidationFailure

pytestmark = pytest.mark.anyio


@pytest.fixture
def client(api) -> CheckoutClient:
    return CheckoutClient(http_client=api)


@pytest.fixture
def buyer() -> BuyerDetails:
    return BuyerDetails(email="buyer@example.com", name="Ada Buyer", country="MX")


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://api.test")


class TestGetSession:

    async def test_unknown_session_is_none(self, client, seeded):
        assert await client.get_session("does-not-exist") is None

    async def test_transport_error_is_none(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with mock_client(handler) as http:
            assert await CheckoutClient(http_client=http).get_session("abc") is None

    async def test_server_error_is_none(self):
        def handler(request):
            return httpx.Response(500, json={"statusCode": 500, "message": "boom"})

        async with mock_client(handler) as http:
            assert await CheckoutClient(http_client=http).get_session("abc") is None

    async def test_session_id_is_escaped_in_path(self):
        seen = []

        def handler(request):
            seen.append(request.url.raw_path)
            return httpx.Response(404, json={"message": "Checkout session not found"})

        async with mock_client(handler) as http:
            await CheckoutClient(http_client=http).get_session("a/b")

        assert seen == [b"/checkout/session/a%2Fb"]


class TestCreateSession:

    async def test_create_then_get(self, client, seeded, buyer):
        created = await client.create_session(package_id="P1", billing_cycle="monthly", buyer=buyer)

        assert created.checkout_url == f"http://localhost:3000/checkout/{created.session_id}"

        session = await client.get_session(created.session_id)
        assert session is not None
        assert session.status is CheckoutSessionStatus.PENDING
        assert session.price == 29.99
        assert session.platform_fee == 3.0
        assert session.shop_id == "SHOP-1"
        assert session.email == "buyer@example.com"
        assert session.expires_at > session.created_at

    async def test_custom_amount_overrides_table_price(self, client, seeded):
        created = await client.create_session(package_id="P1", billing_cycle="yearly", custom_amount=150.0)
        session = await client.get_session(created.session_id)

        assert session.price == 150.0
        assert session.custom_amount == 150.0
        assert session.platform_fee == 15.0

    async def test_zero_custom_amount_keeps_table_price(self, client, seeded):
        created = await client.create_session(package_id="P1", billing_cycle="yearly", custom_amount=0)
        session = await client.get_session(created.session_id)

        assert session.price == 299.99
        assert session.platform_fee == 30.0

    async def test_metadata_is_stored(self, client, seeded):
        created = await client.create_session(
            package_id="P1", billing_cycle="weekly", metadata={"campaign": "spring"},
        )
        session = await client.get_session(created.session_id)
        assert session.metadata == {"campaign": "spring"}

    async def test_two_calls_create_two_sessions(self, client, seeded):
        first = await client.create_session(package_id="P1", billing_cycle="monthly")
        second = await client.create_session(package_id="P1", billing_cycle="monthly")
        assert first.session_id != second.session_id

    async def test_idempotency_key_reuses_session(self, client, seeded):
        first = await client.create_session(package_id="P1", billing_cycle="monthly", idempotency_key="cart-7")
        second = await client.create_session(package_id="P1", billing_cycle="monthly", idempotency_key="cart-7")
        assert first.session_id == second.session_id

    async def test_shop_without_kyc_is_rejected(self, client, seeded):
        with pytest.raises(ValidationFailure) as exc_info:
            await client.create_session(package_id="P-NOKYC", billing_cycle="monthly")
        assert exc_info.value.message == "Shop has not completed KYC verification"

    async def test_unknown_package_is_not_found(self, client, seeded):
        with pytest.raises(NotFoundError) as exc_info:
            await client.create_session(package_id="nope", billing_cycle="monthly")
        assert exc_info.value.message == "Package not found"

    async def test_inactive_package_is_rejected(self, client, seeded):
        with pytest.raises(ValidationFailure) as exc_info:
            await client.create_session(package_id="P-INACTIVE", billing_cycle="monthly")
        assert exc_info.value.message == "Package is not active"

    async def test_invalid_cycle_reaches_backend(self, client, seeded):
        with pytest.raises(ValidationFailure) as exc_info:
            await client.create_session(package_id="P1", billing_cycle="daily")
        assert exc_info.value.status_code == 400
        assert "billingCycle" in exc_info.value.message

    async def test_negative_custom_amount_is_rejected(self, client, seeded):
        with pytest.raises(ValidationFailure):
            await client.create_session(package_id="P1", billing_cycle="monthly", custom_amount=-1)

    async def test_transport_failure_uses_generic_message(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        async with mock_client(handler) as http:
            with pytest.raises(RequestError) as exc_info:
                await CheckoutClient(http_client=http).create_session(package_id="P1", billing_cycle="monthly")

        assert exc_info.value.message == "Failed to create checkout session"
        assert exc_info.value.__cause__ is None


class TestAttachProviderCheckout:

    async def test_returns_provider_url(self, client, seeded, buyer, fake_provider):
        created = await client.create_session(package_id="P1", billing_cycle="monthly")
        link = await client.attach_provider_checkout(created.session_id, buyer)

        assert link.url == "https://checkout.stripe.test/c/pay/cs_test_1"
        assert len(fake_provider.calls) == 1
        call = fake_provider.calls[0]
        assert call["customer_email"] == "buyer@example.com"
        assert call["shop"].id == "SHOP-1"
        assert call["cancel_url"] == created.checkout_url

        session = await client.get_session(created.session_id)
        assert session.stripe_checkout_session_id == "cs_test_1"
        assert session.name == "Ada Buyer"
        assert session.status is CheckoutSessionStatus.PENDING

    async def test_unknown_session_is_not_found(self, client, seeded, buyer):
        with pytest.raises(NotFoundError) as exc_info:
            await client.attach_provider_checkout("missing", buyer)
        assert exc_info.value.message == "Checkout session not found"

    async def test_completed_session_is_rejected(self, client, seeded, buyer, session_factory, fake_provider):
        created = await client.create_session(package_id="P1", billing_cycle="monthly")
        async with session_factory() as session:
            await CheckoutService(session, get_settings()).mark_session_completed(created.session_id)

        with pytest.raises(ValidationFailure) as exc_info:
            await client.attach_provider_checkout(created.session_id, buyer)
        assert exc_info.value.message == "Checkout session is not valid"
        assert fake_provider.calls == []

    async def test_provider_rejection_message_reaches_caller(
        self, client, seeded, buyer, fake_provider, stripe_declined,
    ):
        created = await client.create_session(package_id="P1", billing_cycle="monthly")
        fake_provider.error = stripe_declined

        with pytest.raises(ValidationFailure) as exc_info:
            await client.attach_provider_checkout(created.session_id, buyer)
        assert exc_info.value.message == "Failed to create Stripe checkout: Your card was declined."

        # La sesión sigue pending y sin id del proveedor
        session = await client.get_session(created.session_id)
        assert session.status is CheckoutSessionStatus.PENDING
        assert session.stripe_checkout_session_id is None
