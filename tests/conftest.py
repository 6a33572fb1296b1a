# -*- coding: utf-8 -*-
"""
tests/conftest.py

Config global de tests para Storefront.

- PYTHON_ENV=test antes de importar storefront (settings de prueba, SQLite en memoria).
- Engine SQLite en memoria por test (aiosqlite + StaticPool) con datos sembrados.
- App FastAPI con overrides de dependencias (sesión de BD y proveedor de pago falso).
- Cliente httpx contra la app vía ASGITransport; los bindings de cliente se
  construyen sobre ese cliente.

Autor: Storefront
Fecha: 2026-09-14
"""

import logging
import os

# === Debe ir antes de importar storefront ===
os.environ["PYTHON_ENV"] = "test"
os.environ.setdefault("FRONTEND_URL", "http://localhost:3000")

from collections.abc import AsyncIterator
from typing import Optional

import pytest
import stripe
from httpx import ASGITransport, AsyncClient

from storefront.main import create_app
from storefront.modules.checkout.providers.stripe_provider import ProviderSessionResult
from storefront.modules.checkout.routes import get_checkout_provider
from storefront.modules.packages.models import Package, Shop
from storefront.shared.config import get_settings
from storefront.shared.database.database import (
    build_engine,
    build_session_factory,
    get_async_session,
    init_models,
)


@pytest.fixture
def anyio_backend():
    return "asyncio"


# ------------------------------------------------------------
# BASE DE DATOS
# ------------------------------------------------------------
@pytest.fixture
async def db_engine():
    engine = build_engine("sqlite+aiosqlite://")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return build_session_factory(db_engine)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded(session_factory) -> dict:
    """
    Catálogo mínimo:
    - P1: activo, tienda con KYC, monthly 29.99
    - P-INACTIVE: desactivado
    - P-NOKYC: activo, tienda sin cargos habilitados
    """
    async with session_factory() as session:
        shop = Shop(
            id="SHOP-1",
            name="Test Shop",
            slug="test-shop",
            owner_id="owner-1",
            email="shop@example.com",
            stripe_account_id="acct_test_123",
            stripe_charges_enabled=True,
            platform_fee_percent=10.0,
        )
        shop_no_kyc = Shop(
            id="SHOP-2",
            name="Pending Shop",
            slug="pending-shop",
            owner_id="owner-2",
            email="pending@example.com",
            stripe_charges_enabled=False,
        )
        session.add_all([shop, shop_no_kyc])
        await session.flush()

        session.add_all([
            Package(
                id="P1",
                shop_id="SHOP-1",
                name="Pro Digital Suite",
                description="Complete digital toolkit for professionals",
                base_price=39.99,
                weekly_price=9.99,
                monthly_price=29.99,
                yearly_price=299.99,
                features=["Analytics", "Priority support"],
                is_subscription=True,
                trial_days=7,
            ),
            Package(
                id="P-INACTIVE",
                shop_id="SHOP-1",
                name="Retired Pack",
                base_price=10.0,
                weekly_price=3.0,
                monthly_price=10.0,
                yearly_price=100.0,
                is_active=False,
            ),
            Package(
                id="P-NOKYC",
                shop_id="SHOP-2",
                name="Starter Pack",
                description="Entry level pack",
                base_price=19.99,
                weekly_price=5.99,
                monthly_price=19.99,
                yearly_price=199.99,
            ),
        ])
        await session.commit()

    return {"package_id": "P1", "inactive_package_id": "P-INACTIVE", "no_kyc_package_id": "P-NOKYC"}


# ------------------------------------------------------------
# PROVEEDOR DE PAGO FALSO
# ------------------------------------------------------------
class FakeCheckoutProvider:
    """Registra las llamadas; `error` simula un rechazo de Stripe."""

    def __init__(self):
        self.calls: list[dict] = []
        self.error: Optional[Exception] = None

    async def create_checkout_session(self, **kwargs) -> ProviderSessionResult:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        n = len(self.calls)
        return ProviderSessionResult(
            checkout_url=f"https://checkout.stripe.test/c/pay/cs_test_{n}",
            session_id=f"cs_test_{n}",
        )


@pytest.fixture
def fake_provider() -> FakeCheckoutProvider:
    return FakeCheckoutProvider()


@pytest.fixture
def stripe_declined() -> stripe.StripeError:
    return stripe.StripeError("Your card was declined.")


# ------------------------------------------------------------
# APP Y CLIENTE HTTP
# ------------------------------------------------------------
@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def app(session_factory, fake_provider):
    fastapi_app = create_app()

    async def _session_override():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_async_session] = _session_override
    fastapi_app.dependency_overrides[get_checkout_provider] = lambda: fake_provider
    return fastapi_app


@pytest.fixture
async def api(app) -> AsyncIterator[AsyncClient]:
    """Cliente httpx contra la app (ASGITransport, sin red)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client



# ------------------------------------------------------------
# LOGGING
# ------------------------------------------------------------
@pytest.fixture
def restore_logging():
    """Restaura handlers y nivel del root logger tras tests que llaman setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
