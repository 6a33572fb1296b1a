# -*- coding: utf-8 -*-
"""
storefront/main.py

Punto de entrada del backend de referencia de Storefront.

- create_app(): CORS, manejo de errores JSON, routers de paquetes, checkout
  y compras, y GET /health.
- Lifespan: logging, creación de tablas, datos de ejemplo (dev), scheduler
  con el job de expiración; en shutdown detiene el scheduler, cierra el
  cliente HTTP global y libera el engine.

Autor: Storefront
Fecha: 2026-09-14
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de leer settings
# En PROD: override=False para respetar variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_override_env = os.getenv("PYTHON_ENV", "development").strip().lower() != "production"
load_dotenv(dotenv_path=_ENV_PATH, override=_override_env)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront import __version__
from storefront.shared.config import get_settings, setup_logging
from storefront.shared.core import close_http_client
from storefront.shared.database import dispose_engine, get_async_session_context, init_models
from storefront.shared.middleware import register_exception_handlers
from storefront.shared.scheduler import get_scheduler

from storefront.modules.checkout.jobs import register_expire_sessions_job
from storefront.modules.checkout.routes import router as checkout_router
from storefront.modules.packages.routes import router as packages_router
from storefront.modules.packages.seed import seed_sample_data
from storefront.modules.purchases.routes import router as purchases_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"🚀 Iniciando {settings.app_name} v{__version__} (env={settings.python_env})")

    await init_models()

    if settings.seed_sample_data:
        async with get_async_session_context() as session:
            await seed_sample_data(session)

    scheduler = get_scheduler()
    if settings.scheduler_enabled:
        register_expire_sessions_job(settings.expire_sessions_interval_minutes)
        scheduler.start()

    try:
        yield
    finally:
        logger.info("Apagando servicios...")
        scheduler.shutdown(wait=False)
        await close_http_client()
        await dispose_engine()
        logger.info("✅ Shutdown completo")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(packages_router)
    app.include_router(checkout_router)
    app.include_router(purchases_router)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok", "version": __version__}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=_settings.app_host,
        port=_settings.app_port,
        reload=_settings.is_dev,
    )

# Fin del archivo storefront/main.py
