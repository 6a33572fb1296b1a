# -*- coding: utf-8 -*-
"""
storefront/shared/core/http_client_cache.py

Gestión del cliente HTTP global compartido por los bindings de la API.

El transporte se crea SIN reintentos: los bindings no tienen política de
retry, un fallo se reporta al llamador tal cual.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations
import asyncio
import httpx
import logging

from .resources_cache import resources

logger = logging.getLogger(__name__)

# Lock async para evitar creación concurrente del cliente HTTP
_http_client_lock = asyncio.Lock()


async def create_http_client() -> bool:
    """
    Crea el cliente HTTP global compartido.
    Protegido contra creación concurrente con asyncio.Lock.
    Usa base_url, User-Agent identificable y timeouts desde settings.
    """
    async with _http_client_lock:
        try:
            from storefront.shared.config import get_settings
            settings = get_settings()

            logger.info("🔗 Inicializando cliente HTTP global...")

            # Cerrar cliente previo si existe (prevención de fugas en re-init/tests)
            if resources.http_client is not None:
                try:
                    await resources.http_client.aclose()
                    logger.debug("Cliente HTTP previo cerrado correctamente")
                except Exception as e:
                    logger.debug(f"No se pudo cerrar cliente HTTP previo: {e}")

            headers = {
                "User-Agent": f"{settings.app_name}/{settings.app_version}",
                "Content-Type": "application/json",
                **(settings.http_extra_headers or {})
            }

            timeout = httpx.Timeout(settings.http_timeout_seconds)
            limits = httpx.Limits(
                max_connections=20,
                max_keepalive_connections=10,
                keepalive_expiry=30.0,
            )
            transport = httpx.AsyncHTTPTransport(retries=0)

            resources.http_client = httpx.AsyncClient(
                base_url=settings.api_base_url,
                headers=headers,
                timeout=timeout,
                limits=limits,
                transport=transport,
            )

            logger.info("✅ Cliente HTTP global inicializado (base_url=%s)", settings.api_base_url)
            return True

        except Exception as e:
            logger.error(f"❌ Error inicializando cliente HTTP: {e}")
            return False


async def get_http_client() -> httpx.AsyncClient:
    """
    Obtiene el cliente HTTP global. Si no existe, lo crea.
    """
    if resources.http_client is None:
        logger.info("🔗 Cliente HTTP no inicializado, creando...")
        ok = await create_http_client()
        if not ok:
            raise RuntimeError("No fue posible inicializar el cliente HTTP global")
    return resources.http_client


async def close_http_client() -> None:
    """Cierra el cliente HTTP global (shutdown de la app)."""
    if resources.http_client is not None:
        await resources.http_client.aclose()
        resources.http_client = None
        logger.info("Cliente HTTP global cerrado")


# Fin del archivo storefront/shared/core/http_client_cache.py
