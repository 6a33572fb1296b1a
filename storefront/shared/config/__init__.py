# -*- coding: utf-8 -*-
"""
storefront/shared/config/__init__.py

Punto único de acceso a la configuración:
    from storefront.shared.config import get_settings

Autor: Storefront
Fecha: 2026-09-14
"""

from .config_loader import get_settings
from .logging_config import setup_logging
from .settings_base import BaseAppSettings

__all__ = ["get_settings", "setup_logging", "BaseAppSettings"]
# Fin del archivo storefront/shared/config/__init__.py
