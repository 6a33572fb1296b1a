# -*- coding: utf-8 -*-
"""
storefront/shared/config/settings_base.py

Base de configuración (Pydantic v2) para Storefront.
- Esta clase NO instancia singletons; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.

Autor: Storefront
Fecha: 2026-09-14
"""

from typing import Literal, Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="Storefront", validation_alias="APP_NAME")
    app_version: str = Field(default="0.1.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=29000, validation_alias="APP_PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # =========================
    # API externa (bindings de cliente)
    # =========================
    api_base_url: str = Field(
        default="http://localhost:29000",
        validation_alias=AliasChoices("STOREFRONT_API_URL", "API_URL"),
    )
    http_timeout_seconds: float = Field(default=30.0, validation_alias="HTTP_TIMEOUT_SECONDS")
    http_extra_headers: dict[str, str] = Field(default_factory=dict, validation_alias="HTTP_EXTRA_HEADERS")

    # =========================
    # Frontend / CORS
    # =========================
    frontend_url: str = Field(default="http://localhost:3000", validation_alias="FRONTEND_URL")
    allowed_origins: str = Field(default="http://localhost:3000", validation_alias="ALLOWED_ORIGINS")

    # =========================
    # Base de datos (backend de referencia)
    # =========================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./storefront.db",
        validation_alias="DATABASE_URL",
    )
    db_echo_sql: bool = Field(default=False, validation_alias="DB_ECHO_SQL")

    # =========================
    # Checkout
    # =========================
    checkout_session_ttl_hours: int = Field(default=24, validation_alias="CHECKOUT_SESSION_TTL_HOURS")
    expire_sessions_interval_minutes: int = Field(default=5, validation_alias="EXPIRE_SESSIONS_INTERVAL_MINUTES")
    scheduler_enabled: bool = Field(default=True, validation_alias="SCHEDULER_ENABLED")
    seed_sample_data: bool = Field(default=False, validation_alias="SEED_SAMPLE_DATA")

    # Stripe
    stripe_secret_key: Optional[SecretStr] = Field(default=None, validation_alias="STRIPE_SECRET_KEY")
    stripe_currency: str = Field(default="usd", validation_alias="STRIPE_CURRENCY")

    # =========================
    # Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "pretty", "plain"] = Field(default="plain", validation_alias="LOG_FORMAT")

    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    def get_cors_origins(self) -> list[str]:
        """Convierte allowed_origins en lista procesable para CORS middleware."""
        if not self.allowed_origins or self.allowed_origins == "*":
            return ["*"]
        return [o.strip().strip('"').strip("'") for o in self.allowed_origins.split(",") if o.strip()]

    def _security_and_payments_checks(self) -> None:
        """
        Validaciones mínimas de seguridad y coherencia.
        Se invoca desde config_loader tras instanciar el settings.
        """
        import logging
        logger = logging.getLogger(__name__)

        if self.is_prod:
            if not self.frontend_url.startswith("https://"):
                raise ValueError("FRONTEND_URL debe usar https en producción")
            if self.stripe_secret_key is None or not self.stripe_secret_key.get_secret_value():
                raise ValueError("STRIPE_SECRET_KEY es requerido en producción")

        if self.is_dev and self.stripe_secret_key is None:
            logger.info("ℹ️ STRIPE_SECRET_KEY no configurada - el handoff a Stripe fallará con 400")

        if self.checkout_session_ttl_hours <= 0:
            raise ValueError("CHECKOUT_SESSION_TTL_HOURS debe ser > 0")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


__all__ = ["BaseAppSettings", "EnvName"]
# Fin del archivo storefront/shared/config/settings_base.py
