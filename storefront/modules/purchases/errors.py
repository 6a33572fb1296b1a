# -*- coding: utf-8 -*-
"""
storefront/modules/purchases/errors.py

Excepciones de dominio de compras.

Autor: Storefront
Fecha: 2026-09-14
"""

from storefront.shared.errors import BusinessRuleViolation, InvalidStateTransition, ResourceNotFound


class PurchaseNotFound(ResourceNotFound):
    """Se lanza cuando no se encuentra una compra por ID."""
    def __init__(self, purchase_id):
        self.purchase_id = purchase_id
        super().__init__(f"Purchase with ID {purchase_id} not found")


class InvalidPurchaseTransition(InvalidStateTransition):
    """Transición de estado no permitida para una compra."""
    def __init__(self, from_state, to_state):
        from_value = getattr(from_state, "value", from_state)
        to_value = getattr(to_state, "value", to_state)
        super().__init__(
            from_value,
            to_value,
            f"Cannot change purchase status from {from_value} to {to_value}",
        )


class CheckoutSessionMismatch(BusinessRuleViolation):
    """La sesión de checkout vinculada es de otro paquete o ciclo."""
    def __init__(self, session_id):
        self.session_id = session_id
        super().__init__("Checkout session does not match the purchase")


__all__ = ["PurchaseNotFound", "InvalidPurchaseTransition", "CheckoutSessionMismatch"]

# Fin del archivo storefront/modules/purchases/errors.py
