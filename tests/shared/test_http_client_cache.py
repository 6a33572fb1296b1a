# -*- coding: utf-8 -*-
"""
tests/shared/test_http_client_cache.py

Cliente HTTP global de los bindings.

Autor: Storefront
Fecha: 2026-09-14
"""

import pytest

from storefront.shared.config import get_settings
from storefront.shared.core import close_http_client, get_http_client
from storefront.shared.core.resources_cache import resources

pytestmark = pytest.mark.anyio


async def test_client_is_created_once_and_closed():
    settings = get_settings()
    try:
        first = await get_http_client()
        second = await get_http_client()

        assert first is second
        assert str(first.base_url).rstrip("/") == settings.api_base_url.rstrip("/")
        assert first.headers["User-Agent"] == f"{settings.app_name}/{settings.app_version}"
        assert first.timeout.read == settings.http_timeout_seconds
    finally:
        await close_http_client()

    assert resources.http_client is None
    assert first.is_closed


async def test_close_without_client_is_noop():
    await close_http_client()
    assert resources.http_client is None
