# -*- coding: utf-8 -*-
"""
storefront/shared/database/base.py

Base declarativa, convención de nombres y tipos de columna compartidos.

Este módulo proporciona:
- Base: clase base declarativa de SQLAlchemy
- NAMING_CONVENTION: convención de nombres para constraints
- UTCDateTime: DateTime que siempre persiste UTC naive y devuelve UTC aware
- new_uuid / utcnow: defaults del lado Python

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import DateTime, MetaData
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator

# ===== NAMING CONVENTION =====
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


# ===== BASE DECLARATIVA =====
class Base(DeclarativeBase):
    """
    Base declarativa para todos los modelos ORM de Storefront.
    Incluye convención de nombres para constraints.
    """
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# ===== TIPOS =====
class UTCDateTime(TypeDecorator):
    """
    DateTime portable entre SQLite y PostgreSQL.

    - Al escribir: convierte a UTC y elimina tzinfo (los naive se asumen UTC).
    - Al leer: devuelve siempre datetime aware en UTC.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_uuid() -> str:
    return str(uuid4())


__all__ = ["Base", "NAMING_CONVENTION", "UTCDateTime", "utcnow", "new_uuid"]

# Fin del archivo storefront/shared/database/base.py
