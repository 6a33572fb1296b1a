# -*- coding: utf-8 -*-
"""
storefront/modules/checkout/errors.py

Excepciones de dominio del checkout.

Autor: Storefront
Fecha: 2026-09-14
"""

from storefront.shared.errors import BusinessRuleViolation, ResourceNotFound


class CheckoutSessionNotFound(ResourceNotFound):
    """Se lanza cuando no existe la sesión pública solicitada."""
    def __init__(self, session_id):
        self.session_id = session_id
        super().__init__("Checkout session not found")


class CheckoutSessionNotPending(BusinessRuleViolation):
    """La sesión ya está completada o expirada (inmutable)."""
    def __init__(self, session_id, status):
        self.session_id = session_id
        self.status = status
        super().__init__("Checkout session is not valid")


class ProviderCheckoutFailed(BusinessRuleViolation):
    """El proveedor de pagos rechazó la creación de su sesión."""
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to create Stripe checkout: {reason}")


__all__ = [
    "CheckoutSessionNotFound",
    "CheckoutSessionNotPending",
    "ProviderCheckoutFailed",
]

# Fin del archivo storefront/modules/checkout/errors.py
