# -*- coding: utf-8 -*-
"""
storefront/modules/packages/pricing.py

Resolución de precio por ciclo de cobro.

- resolve_cycle_price(): lookup exacto en la tabla de precios del paquete.
  Sin prorrateo ni cálculo alternativo: el precio cobrado es el de la tabla.
- billing_cycle_discount(): porcentaje de descuento SOLO para presentación;
  nunca determina el precio cobrado.
- calculate_period_end(): fin de la ventana de suscripción.
- platform_fee(): comisión de la plataforma redondeada a centavos.

Autor: Storefront
Fecha: 2026-09-14
"""

from __future__ import annotations

import calendar
import math
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol, Union

from .enums import BillingCycle

_CYCLE_FIELDS = {
    BillingCycle.WEEKLY: "weekly_price",
    BillingCycle.MONTHLY: "monthly_price",
    BillingCycle.YEARLY: "yearly_price",
}


class PriceTable(Protocol):
    base_price: float
    weekly_price: float
    monthly_price: float
    yearly_price: float


def resolve_cycle_price(price_table: PriceTable, cycle: Union[BillingCycle, str]) -> float:
    """
    Devuelve el precio a cobrar para `cycle`.

    Raises:
        ValueError: si el ciclo no es weekly/monthly/yearly
    """
    cycle = BillingCycle(cycle)
    return float(getattr(price_table, _CYCLE_FIELDS[cycle]))


def billing_cycle_discount(base_price: float, cycle_price: float) -> int:
    """
    Descuento (%) del precio del ciclo frente al precio base, redondeado
    half-up como en los clientes web.

    Raises:
        ValueError: si base_price es 0 (el llamador debe evitar mostrarlo)
    """
    if not base_price:
        raise ValueError("base_price must be non-zero to compute a discount")
    return math.floor(((base_price - cycle_price) / base_price) * 100 + 0.5)


def _add_months(start: datetime, months: int) -> datetime:
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return start.replace(year=year, month=month, day=day)


def calculate_period_end(start: datetime, cycle: Union[BillingCycle, str]) -> datetime:
    """
    Fin del periodo que inicia en `start`: +7 días, +1 mes o +1 año.
    Los meses se ajustan al último día del mes destino (31 ene → 28/29 feb).
    """
    cycle = BillingCycle(cycle)
    if cycle is BillingCycle.WEEKLY:
        return start + timedelta(days=7)
    if cycle is BillingCycle.MONTHLY:
        return _add_months(start, 1)
    return _add_months(start, 12)


def platform_fee(price: float, percent: float) -> float:
    """Comisión `percent`% de `price`, redondeada a centavos (half-up)."""
    fee = Decimal(str(price)) * Decimal(str(percent)) / Decimal(100)
    return float(fee.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


__all__ = [
    "PriceTable",
    "resolve_cycle_price",
    "billing_cycle_discount",
    "calculate_period_end",
    "platform_fee",
]

# Fin del archivo storefront/modules/packages/pricing.py
