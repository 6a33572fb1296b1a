# -*- coding: utf-8 -*-
"""
tests/shared/test_settings.py

Carga de configuración por entorno y validaciones de arranque.

Autor: Storefront
Fecha: 2026-09-14
"""

import pytest

from storefront.shared.config import get_settings
from storefront.shared.config.settings_dev import DevSettings
from storefront.shared.config.settings_prod import ProdSettings
from storefront.shared.config.settings_testing import EnvTestingSettings


@pytest.fixture
def fresh_settings(monkeypatch):
    """Limpia la caché de get_settings antes y después del test."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_test_environment_defaults(fresh_settings):
    settings = get_settings()

    assert isinstance(settings, EnvTestingSettings)
    assert settings.is_test
    assert settings.scheduler_enabled is False
    assert settings.database_url == "sqlite+aiosqlite://"
    assert settings.checkout_session_ttl_hours == 24


def test_development_environment(fresh_settings):
    fresh_settings.setenv("PYTHON_ENV", "development")
    settings = get_settings()

    assert isinstance(settings, DevSettings)
    assert settings.seed_sample_data is True


def test_env_overrides(fresh_settings):
    fresh_settings.setenv("CHECKOUT_SESSION_TTL_HOURS", "2")
    fresh_settings.setenv("STOREFRONT_API_URL", "https://api.shop.test")

    settings = get_settings()
    assert settings.checkout_session_ttl_hours == 2
    assert settings.api_base_url == "https://api.shop.test"


def test_non_positive_ttl_is_rejected(fresh_settings):
    fresh_settings.setenv("CHECKOUT_SESSION_TTL_HOURS", "0")
    with pytest.raises(ValueError, match="CHECKOUT_SESSION_TTL_HOURS"):
        get_settings()


class TestProduction:

    def test_requires_https_frontend(self, fresh_settings):
        fresh_settings.setenv("PYTHON_ENV", "production")
        fresh_settings.setenv("FRONTEND_URL", "http://shop.test")
        fresh_settings.setenv("STRIPE_SECRET_KEY", "sk_live_x")

        with pytest.raises(ValueError, match="FRONTEND_URL"):
            get_settings()

    def test_requires_stripe_key(self, fresh_settings):
        fresh_settings.setenv("PYTHON_ENV", "production")
        fresh_settings.setenv("FRONTEND_URL", "https://shop.test")
        fresh_settings.delenv("STRIPE_SECRET_KEY", raising=False)

        with pytest.raises(ValueError, match="STRIPE_SECRET_KEY"):
            get_settings()

    def test_valid_production_config(self, fresh_settings):
        fresh_settings.setenv("PYTHON_ENV", "production")
        fresh_settings.setenv("FRONTEND_URL", "https://shop.test")
        fresh_settings.setenv("STRIPE_SECRET_KEY", "sk_live_x")

        settings = get_settings()
        assert isinstance(settings, ProdSettings)
        assert settings.log_format == "json"
        assert settings.stripe_secret_key.get_secret_value() == "sk_live_x"


@pytest.mark.parametrize("raw,expected", [
    ("*", ["*"]),
    ("https://a.test, 'https://b.test'", ["https://a.test", "https://b.test"]),
    ("", ["*"]),
])
def test_cors_origins(raw, expected):
    settings = EnvTestingSettings(ALLOWED_ORIGINS=raw)
    assert settings.get_cors_origins() == expected
