# -*- coding: utf-8 -*-
"""
storefront/modules/purchases/lifecycle.py

Reglas de transición de una compra y helpers de la ventana de suscripción.

    pending ──► completed ──► refunded
       │
       ├──► cancelled
       └──► expired

cancelled / expired / refunded son finales.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Optional, Union

from storefront.shared.database.base import utcnow

from .enums import PurchaseStatus
from .errors import InvalidPurchaseTransition

StatusLike = Union[PurchaseStatus, str]

ALLOWED_TRANSITIONS: dict[PurchaseStatus, frozenset[PurchaseStatus]] = {
    PurchaseStatus.PENDING: frozenset({
        PurchaseStatus.COMPLETED,
        PurchaseStatus.CANCELLED,
        PurchaseStatus.EXPIRED,
    }),
    PurchaseStatus.COMPLETED: frozenset({PurchaseStatus.REFUNDED}),
    PurchaseStatus.CANCELLED: frozenset(),
    PurchaseStatus.EXPIRED: frozenset(),
    PurchaseStatus.REFUNDED: frozenset(),
}


def can_transition(from_status: StatusLike, to_status: StatusLike) -> bool:
    return PurchaseStatus(to_status) in ALLOWED_TRANSITIONS[PurchaseStatus(from_status)]


def ensure_transition(from_status: StatusLike, to_status: StatusLike) -> PurchaseStatus:
    """Devuelve el estado destino o lanza InvalidPurchaseTransition."""
    if not can_transition(from_status, to_status):
        raise InvalidPurchaseTransition(PurchaseStatus(from_status), PurchaseStatus(to_status))
    return PurchaseStatus(to_status)


def is_terminal(status: StatusLike) -> bool:
    return not ALLOWED_TRANSITIONS[PurchaseStatus(status)]


def is_active(purchase, now: Optional[datetime] = None) -> bool:
    """completed y dentro de [start_date, end_date)."""
    now = now or utcnow()
    return (
        PurchaseStatus(purchase.status) is PurchaseStatus.COMPLETED
        and purchase.start_date <= now < purchase.end_date
    )


def is_expired(end_date: datetime, now: Optional[datetime] = None) -> bool:
    return (now or utcnow()) > end_date


def days_remaining(end_date: datetime, now: Optional[datetime] = None) -> int:
    """Días restantes redondeados hacia arriba (negativo si ya venció)."""
    delta = end_date - (now or utcnow())
    return math.ceil(delta.total_seconds() / 86400)


__all__ = [
    "ALLOWED_TRANSITIONS",
    "can_transition",
    "ensure_transition",
    "is_terminal",
    "is_active",
    "is_expired",
    "days_remaining",
]

# Fin del archivo storefront/modules/purchases/lifecycle.py
