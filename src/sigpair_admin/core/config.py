"""Configuración del cliente de administración.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar el cliente.
- Permite que el adaptador HTTP y `SigpairAdmin` lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_TOKEN_LIFETIME_SECONDS = 3600


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias).

    Objetivo: poder guardar el admin token fuera del proyecto que usa la librería.
    """

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "sigpair-admin"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "sigpair-admin"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "sigpair-admin"
    return Path.home() / ".config" / "sigpair-admin"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AdminSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el cliente con lógica.
    - Un único contrato de configuración para el cliente y el adaptador HTTP.
    """

    model_config = SettingsConfigDict(
        env_prefix="SIGPAIR_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Orden: env vars, `.env` del proyecto, luego `.env` global de usuario.
        # La ruta de usuario se resuelve en cada instancia, no al importar.
        user_dotenv = DotEnvSettingsSource(
            settings_cls,
            env_file=get_user_env_file(),
            env_file_encoding="utf-8",
        )
        return (init_settings, env_settings, dotenv_settings, user_dotenv, file_secret_settings)

    base_url: str | None = Field(
        default=None,
        description="Base URL del nodo Sigpair (p.ej. 'http://localhost:8080').",
    )
    admin_token: str | None = Field(
        default=None,
        description="Admin token (bearer) del nodo Sigpair.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="sigpair-admin/0.1",
        min_length=1,
        description="User-Agent para las peticiones al nodo.",
    )

    default_token_lifetime_seconds: int = Field(
        default=DEFAULT_TOKEN_LIFETIME_SECONDS,
        gt=0,
        description="Vida por defecto de un user token cuando no se indica (segundos).",
    )
