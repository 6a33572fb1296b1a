# -*- coding: utf-8 -*-
"""
storefront/modules/packages/errors.py

Excepciones de dominio del catálogo.

Autor: Storefront
Fecha: 2026-09-14
"""

from storefront.shared.errors import BusinessRuleViolation, ResourceNotFound


class PackageNotFound(ResourceNotFound):
    """Se lanza cuando no se encuentra un paquete por ID."""
    def __init__(self, package_id, message=None):
        self.package_id = package_id
        super().__init__(message or f"Package with ID {package_id} not found")


class PackageInactive(BusinessRuleViolation):
    """Se lanza cuando se intenta comprar un paquete desactivado."""
    def __init__(self, package_id):
        self.package_id = package_id
        super().__init__("Package is not active")


class ShopNotFound(ResourceNotFound):
    def __init__(self, shop_id):
        self.shop_id = shop_id
        super().__init__(f"Shop with ID {shop_id} not found")


class ShopNotReady(BusinessRuleViolation):
    """La tienda no tiene cargos habilitados en Stripe (KYC pendiente)."""
    def __init__(self, shop_id):
        self.shop_id = shop_id
        super().__init__("Shop has not completed KYC verification")


__all__ = [
    "PackageNotFound",
    "PackageInactive",
    "ShopNotFound",
    "ShopNotReady",
]

# Fin del archivo storefront/modules/packages/errors.py
