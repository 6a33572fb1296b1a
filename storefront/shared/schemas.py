# -*- coding: utf-8 -*-
"""
storefront/shared/schemas.py

Base Pydantic para los contratos JSON (camelCase en el cable).

Los mismos esquemas se usan en el backend de referencia (respuestas) y
en los bindings de cliente (parseo), de modo que el contrato es único.

Autor: Storefront
Fecha: 2026-09-14
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Modelo base: alias camelCase, acepta snake_case y objetos ORM."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_wire(self) -> dict:
        """Serializa a JSON de cable (camelCase, sin nulos)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = ["CamelModel"]

# Fin del archivo storefront/shared/schemas.py
