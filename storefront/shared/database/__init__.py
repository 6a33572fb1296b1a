# -*- coding: utf-8 -*-
"""
storefront/shared/database/__init__.py

Autor: Storefront
Fecha: 2026-09-14
"""

from .base import NAMING_CONVENTION, Base, UTCDateTime, new_uuid, utcnow
from .database import (
    SessionLocal,
    dispose_engine,
    engine,
    get_async_session,
    get_async_session_context,
    init_models,
)
from .repository import BaseRepository

__all__ = [
    "Base",
    "NAMING_CONVENTION",
    "UTCDateTime",
    "new_uuid",
    "utcnow",
    "engine",
    "SessionLocal",
    "get_async_session",
    "get_async_session_context",
    "init_models",
    "dispose_engine",
    "BaseRepository",
]
