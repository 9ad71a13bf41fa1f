"""Configuración del cliente.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El cliente recibe un `ClientSettings` inmutable en su constructor: no hay
  estado global mutable compartido entre llamadas.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.elasticemail.com/v2"
CONFIG_DIR_NAME = "elastic-email"


def get_user_config_dir() -> Path:
    """Carpeta donde `elastic-email doctor setup` guarda la API key del usuario.

    Windows usa `%APPDATA%`, macOS `Application Support` y el resto
    `$XDG_CONFIG_HOME` (o `~/.config`).
    """

    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA", str(Path.home())))
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return root / CONFIG_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    """Lee pares `ELASTIC_EMAIL_*=valor` de un .env existente para poder fusionarlos."""

    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        key, sep, value = raw_line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        data[key] = value.strip().strip("\"'")
    return data


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# elastic-email user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class ClientSettings(BaseSettings):
    """Configuración inmutable de una instancia de cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin lógica en los facades.
    - `frozen=True`: una instancia de cliente es dueña de su configuración
      durante toda su vida.
    """

    model_config = SettingsConfigDict(
        env_prefix="ELASTIC_EMAIL_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
        frozen=True,
    )

    api_key: str | None = Field(
        default=None,
        description="API key enviada como parámetro `apikey` en cada request.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="URL base del API v2.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="elastic-email-python/0.1",
        min_length=1,
        description="User-Agent enviado al servicio.",
    )
