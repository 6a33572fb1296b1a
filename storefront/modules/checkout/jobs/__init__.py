# -*- coding: utf-8 -*-
"""
storefront/modules/checkout/jobs/__init__.py

Autor: Storefront
Fecha: 2026-09-14
"""

from .expire_sessions_job import (
    EXPIRE_SESSIONS_JOB_ID,
    expire_checkout_sessions,
    register_expire_sessions_job,
)

__all__ = [
    "EXPIRE_SESSIONS_JOB_ID",
    "expire_checkout_sessions",
    "register_expire_sessions_job",
]
