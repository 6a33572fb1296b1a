# -*- coding: utf-8 -*-
"""
tests/modules/checkout/test_expire_sessions_job.py

Job de expiración de sesiones de checkout y su registro en el scheduler.

Autor: Storefront
Fecha: 2026-09-14
"""

from datetime import timedelta

import pytest
from sqlalchemy import select

from storefront.modules.checkout.jobs import (
    EXPIRE_SESSIONS_JOB_ID,
    expire_checkout_sessions,
    register_expire_sessions_job,
)
from storefront.modules.checkout.models import CheckoutSession
from storefront.modules.checkout.schemas import CreateCheckoutSessionRequest
from storefront.modules.checkout.service import CheckoutService
from storefront.modules.purchases.models import Purchase
from storefront.modules.purchases.schemas import CreatePurchaseRequest
from storefront.modules.purchases.service import PurchaseService
from storefront.shared.database.base import utcnow
from storefront.shared.scheduler import get_scheduler


async def open_session(db_session, settings) -> str:
    created = await CheckoutService(db_session, settings).create_session(
        CreateCheckoutSessionRequest(package_id="P1", billing_cycle="monthly")
    )
    return created.session_id


async def purchase_for(db_session, session_id: str) -> str:
    purchase = await PurchaseService(db_session).create(
        CreatePurchaseRequest(
            package_id="P1",
            user_id="user-1",
            billing_cycle="monthly",
            payment_method="stripe_popup",
            customer_email="buyer@example.com",
            customer_name="Ada Buyer",
            checkout_session_id=session_id,
        )
    )
    return purchase.id


@pytest.mark.anyio
async def test_expires_overdue_sessions_and_their_pending_purchases(db_session, seeded, settings):
    overdue = await open_session(db_session, settings)
    fresh = await open_session(db_session, settings)
    linked_purchase = await purchase_for(db_session, overdue)
    other_purchase = await purchase_for(db_session, fresh)

    count = await expire_checkout_sessions(session=db_session, now=utcnow() + timedelta(hours=1))
    assert count == 0

    count = await expire_checkout_sessions(
        session=db_session,
        now=utcnow() + timedelta(hours=settings.checkout_session_ttl_hours, minutes=1),
    )
    assert count == 2

    # Ambas vencen con el mismo TTL; la compra de cada sesión expira con ella
    statuses = dict((await db_session.execute(select(Purchase.id, Purchase.status))).all())
    assert statuses[linked_purchase] == "expired"
    assert statuses[other_purchase] == "expired"


@pytest.mark.anyio
async def test_completed_purchase_completes_its_session(db_session, seeded, settings):
    session_id = await open_session(db_session, settings)
    purchase_id = await purchase_for(db_session, session_id)
    await PurchaseService(db_session).complete(purchase_id, "pay-1")

    later = utcnow() + timedelta(hours=settings.checkout_session_ttl_hours + 1)
    assert await expire_checkout_sessions(session=db_session, now=later) == 0

    status = (await db_session.execute(select(Purchase.status).where(Purchase.id == purchase_id))).scalar_one()
    assert status == "completed"

    session_status = (
        await db_session.execute(select(CheckoutSession.status).where(CheckoutSession.session_id == session_id))
    ).scalar_one()
    assert session_status == "completed"


@pytest.mark.anyio
async def test_session_expired_on_read_also_expires_its_purchase(db_session, seeded, settings):
    session_id = await open_session(db_session, settings)
    purchase_id = await purchase_for(db_session, session_id)

    checkout_session = (
        await db_session.execute(select(CheckoutSession).where(CheckoutSession.session_id == session_id))
    ).scalar_one()
    checkout_session.expires_at = utcnow() - timedelta(minutes=5)
    await db_session.commit()

    read = await CheckoutService(db_session, settings).get_session(session_id)
    assert read.status == "expired"

    # El job ya no ve la sesión (no está pending); la compra no queda colgada
    assert await expire_checkout_sessions(session=db_session) == 0
    status = (await db_session.execute(select(Purchase.status).where(Purchase.id == purchase_id))).scalar_one()
    assert status == "expired"


@pytest.mark.anyio
async def test_running_twice_is_a_no_op(db_session, seeded, settings):
    await open_session(db_session, settings)
    later = utcnow() + timedelta(days=2)

    assert await expire_checkout_sessions(session=db_session, now=later) == 1
    assert await expire_checkout_sessions(session=db_session, now=later) == 0


def test_register_job_in_scheduler():
    scheduler = get_scheduler()
    try:
        job_id = register_expire_sessions_job(interval_minutes=10)

        assert job_id == EXPIRE_SESSIONS_JOB_ID
        jobs = {job["id"]: job for job in scheduler.get_jobs()}
        assert EXPIRE_SESSIONS_JOB_ID in jobs
        assert "0:10:00" in jobs[EXPIRE_SESSIONS_JOB_ID]["trigger"]
    finally:
        scheduler.remove_job(EXPIRE_SESSIONS_JOB_ID)
