# -*- coding: utf-8 -*-
"""
storefront/shared/scheduler/__init__.py

Jobs programados usando APScheduler.

Autor: Storefront
Fecha: 2026-09-14
"""

from .scheduler_service import SchedulerService, get_scheduler

__all__ = [
    "SchedulerService",
    "get_scheduler",
]
