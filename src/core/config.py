"""Configuración del Core.

- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Adaptadores (HTTP, token store) y servicios leen config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "lms-records"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# lms-records user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="LMS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero, luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    username: str | None = Field(
        default=None,
        description="Usuario (email) del panel de administración del LMS.",
    )
    password: str | None = Field(
        default=None,
        description="Contraseña del panel de administración del LMS.",
    )

    api_base_url: str = Field(
        default="https://api.admin.edu.goiteens.com/api/v1",
        min_length=8,
        description="Base URL de la API del LMS.",
    )
    login_page_url: str = Field(
        default="https://admin.edu.goiteens.com/account/login",
        min_length=8,
        description="URL de la página de login que el LMS espera en el body de /auth/login.",
    )
    module_id: int = Field(
        default=17063573,
        ge=1,
        description="Módulo de formación al que pertenecen los materiales adicionales.",
    )

    token_file: Path = Field(
        default=Path("refresh-token.txt"),
        description="Archivo donde se guarda el refresh token.",
    )
    input_file: Path = Field(
        default=Path("input.txt"),
        description="Archivo de lecciones por defecto para upload/preview.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    login_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout para /auth/login, que en el LMS es lento (segundos).",
    )
    user_agent: str = Field(
        default="lms-records/0.1",
        min_length=1,
        description="User-Agent para peticiones al LMS.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
