# -*- coding: utf-8 -*-
"""
storefront/shared/database/database.py

SQLAlchemy async para el backend de referencia.
SQLite (aiosqlite) en desarrollo/pruebas; PostgreSQL (asyncpg) opcional.

Provee:
- engine (create_async_engine)
- SessionLocal (async_sessionmaker)
- Dependencia FastAPI: get_async_session
- context manager: get_async_session_context()
- init_models() / dispose_engine()

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from storefront.shared.config import get_settings
from storefront.shared.database.base import Base

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Crea el engine async.
    Una SQLite en memoria usa StaticPool para compartir la única conexión
    entre sesiones (si no, cada conexión vería una base vacía).
    """
    kwargs: dict = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url.endswith("://") or ":memory:" in database_url:
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return create_async_engine(database_url, **kwargs)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        expire_on_commit=False,
        class_=AsyncSession,
        autoflush=False,
    )


_settings = get_settings()

# ── Engine y session factory del proceso
engine = build_engine(_settings.database_url, echo=_settings.db_echo_sql)
SessionLocal = build_session_factory(engine)

logger.debug(f"[DB] Engine configurado → {engine.url.render_as_string(hide_password=True)}")


# ── Dependencia FastAPI
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
        except SQLAlchemyError:
            # rollback para liberar cualquier transacción abierta
            await session.rollback()
            raise


# ── Context manager reutilizable en jobs/scripts/tests
@asynccontextmanager
async def get_async_session_context() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
        finally:
            if session.in_transaction():
                await session.rollback()


async def init_models(bind: AsyncEngine | None = None) -> None:
    """Crea las tablas declaradas (idempotente)."""
    # Registrar modelos en Base.metadata
    import storefront.modules.packages.models  # noqa: F401
    import storefront.modules.checkout.models  # noqa: F401
    import storefront.modules.purchases.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("✅ Tablas verificadas/creadas")


async def dispose_engine() -> None:
    await engine.dispose()
    logger.info("Engine de base de datos liberado")


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "build_engine",
    "build_session_factory",
    "get_async_session",
    "get_async_session_context",
    "init_models",
    "dispose_engine",
]
# Fin del archivo storefront/shared/database/database.py
