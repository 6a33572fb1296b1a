# -*- coding: utf-8 -*-
"""
storefront/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista: logging moderado, base de datos en memoria,
sin scheduler ni datos de ejemplo.

Autor: Storefront
Fecha: 2026-09-14
"""

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: str = "test"

    # --- Logging en test: menos ruido ---
    log_level: str = "WARNING"
    log_format: str = "plain"

    # --- Base de datos aislada ---
    database_url: str = "sqlite+aiosqlite://"

    # --- Sin jobs en segundo plano ---
    scheduler_enabled: bool = False
    seed_sample_data: bool = False

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo storefront/shared/config/settings_testing.py
