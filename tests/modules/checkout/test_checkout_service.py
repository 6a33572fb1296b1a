# -*- coding: utf-8 -*-
"""
tests/modules/checkout/test_checkout_service.py

CheckoutService a nivel de servicio (sin HTTP).

Autor: Storefront
Fecha: 2026-09-14
"""

from datetime import timedelta

import pytest
from sqlalchemy import select

from storefront.modules.checkout.enums import CheckoutSessionStatus
from storefront.modules.checkout.errors import (
    CheckoutSessionNotFound,
    CheckoutSessionNotPending,
    ProviderCheckoutFailed,
)
from storefront.modules.checkout.models import CheckoutSession
from storefront.modules.checkout.providers.stripe_provider import ProviderNotConfigured
from storefront.modules.checkout.schemas import BuyerDetails, CreateCheckoutSessionRequest
from storefront.modules.checkout.service import CheckoutService
from storefront.shared.database.base import utcnow

pytestmark = pytest.mark.anyio


def create_request(**overrides) -> CreateCheckoutSessionRequest:
    fields = {"package_id": "P1", "billing_cycle": "monthly", "email": "buyer@example.com"}
    fields.update(overrides)
    return CreateCheckoutSessionRequest(**fields)


async def backdate(db_session, session_id: str, hours: int = 1) -> None:
    checkout_session = (
        await db_session.execute(select(CheckoutSession).where(CheckoutSession.session_id == session_id))
    ).scalar_one()
    checkout_session.expires_at = utcnow() - timedelta(hours=hours)
    await db_session.commit()


class TestCreateSession:

    async def test_expiry_uses_configured_ttl(self, db_session, seeded, settings):
        service = CheckoutService(db_session, settings)
        before = utcnow()
        created = await service.create_session(create_request())
        stored = await service.get_session(created.session_id)

        ttl = timedelta(hours=settings.checkout_session_ttl_hours)
        assert before + ttl <= stored.expires_at <= utcnow() + ttl
        assert stored.billing_cycle == "monthly"
        assert stored.metadata_json == {}

    async def test_idempotency_key_returns_same_session(self, db_session, seeded, settings):
        service = CheckoutService(db_session, settings)
        first = await service.create_session(create_request(idempotency_key="k-1"))
        second = await service.create_session(create_request(idempotency_key="k-1", billing_cycle="yearly"))

        assert first.session_id == second.session_id
        rows = (await db_session.execute(select(CheckoutSession))).scalars().all()
        assert len(rows) == 1


class TestLazyExpiry:

    async def test_overdue_pending_session_expires_on_read(self, db_session, seeded, settings):
        service = CheckoutService(db_session, settings)
        created = await service.create_session(create_request())
        await backdate(db_session, created.session_id)

        stored = await service.get_session(created.session_id)
        assert stored.status == CheckoutSessionStatus.EXPIRED.value

    async def test_expired_session_cannot_be_handed_off(self, db_session, seeded, settings, fake_provider):
        service = CheckoutService(db_session, settings, fake_provider)
        created = await service.create_session(create_request())
        await backdate(db_session, created.session_id)

        with pytest.raises(CheckoutSessionNotPending):
            await service.create_provider_checkout(created.session_id, BuyerDetails())
        assert fake_provider.calls == []

    async def test_completed_session_is_not_expired_on_read(self, db_session, seeded, settings):
        service = CheckoutService(db_session, settings)
        created = await service.create_session(create_request())
        await service.mark_session_completed(created.session_id)
        await backdate(db_session, created.session_id)

        stored = await service.get_session(created.session_id)
        assert stored.status == CheckoutSessionStatus.COMPLETED.value


class TestCompletion:

    async def test_mark_completed_once(self, db_session, seeded, settings):
        service = CheckoutService(db_session, settings)
        created = await service.create_session(create_request())

        completed = await service.mark_session_completed(created.session_id)
        assert completed.status == CheckoutSessionStatus.COMPLETED.value

        with pytest.raises(CheckoutSessionNotPending) as exc_info:
            await service.mark_session_completed(created.session_id)
        assert exc_info.value.status == CheckoutSessionStatus.COMPLETED.value

    async def test_unknown_session(self, db_session, seeded, settings):
        with pytest.raises(CheckoutSessionNotFound):
            await CheckoutService(db_session, settings).mark_session_completed("nope")


class TestProviderHandoff:

    async def test_without_provider_fails(self, db_session, seeded, settings):
        service = CheckoutService(db_session, settings)
        created = await service.create_session(create_request())

        with pytest.raises(ProviderCheckoutFailed) as exc_info:
            await service.create_provider_checkout(created.session_id, BuyerDetails())
        assert exc_info.value.message == "Failed to create Stripe checkout: no payment provider configured"

    async def test_unconfigured_provider_maps_to_failure(self, db_session, seeded, settings, fake_provider):
        fake_provider.error = ProviderNotConfigured("Stripe is not configured. Set STRIPE_SECRET_KEY.")
        service = CheckoutService(db_session, settings, fake_provider)
        created = await service.create_session(create_request())

        with pytest.raises(ProviderCheckoutFailed) as exc_info:
            await service.create_provider_checkout(created.session_id, BuyerDetails())
        assert exc_info.value.reason == "Stripe is not configured. Set STRIPE_SECRET_KEY."

    async def test_success_url_carries_provider_placeholder(self, db_session, seeded, settings, fake_provider):
        service = CheckoutService(db_session, settings, fake_provider)
        created = await service.create_session(create_request())

        url = await service.create_provider_checkout(created.session_id, BuyerDetails(name="Ada"))

        assert url == "https://checkout.stripe.test/c/pay/cs_test_1"
        call = fake_provider.calls[0]
        assert call["success_url"] == "http://localhost:3000/success?session_id={CHECKOUT_SESSION_ID}"
        assert call["checkout_session"].name == "Ada"
        assert call["package"].id == "P1"


class TestBatchExpiry:

    async def test_only_overdue_pending_sessions(self, db_session, seeded, settings):
        service = CheckoutService(db_session, settings)
        overdue = await service.create_session(create_request())
        fresh = await service.create_session(create_request())
        done = await service.create_session(create_request())
        await service.mark_session_completed(done.session_id)
        await backdate(db_session, overdue.session_id)
        await backdate(db_session, done.session_id)

        expired = await service.expire_sessions()
        await db_session.commit()

        assert list(expired) == [overdue.session_id]
        statuses = dict(
            (await db_session.execute(select(CheckoutSession.session_id, CheckoutSession.status))).all()
        )
        assert statuses[overdue.session_id] == "expired"
        assert statuses[fresh.session_id] == "pending"
        assert statuses[done.session_id] == "completed"

    async def test_session_completed_meanwhile_is_not_reported(self, db_session, seeded, settings):
        service = CheckoutService(db_session, settings)
        overdue = await service.create_session(create_request())
        done = await service.create_session(create_request())
        await backdate(db_session, overdue.session_id)
        await backdate(db_session, done.session_id)

        stale_ids = await service.repo.list_overdue_ids(db_session, utcnow())
        assert set(stale_ids) == {overdue.session_id, done.session_id}

        # Completada entre la lectura y el update
        assert await service.repo.mark_completed(db_session, done.session_id) is True

        expired = await service.repo.mark_expired(db_session, stale_ids)
        await db_session.commit()

        assert list(expired) == [overdue.session_id]
        assert await service.repo.mark_completed(db_session, done.session_id) is False
