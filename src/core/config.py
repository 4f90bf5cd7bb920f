"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los flags de la CLI solo sobrescriben estos valores; los defaults viven aquí.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "localcert"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "localcert"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "localcert"
    return Path.home() / ".config" / "localcert"


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
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves existentes que no aparecen en `values` se conservan.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        try:
            existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError):
            existing = {}

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# localcert user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Orden de precedencia: flags de la CLI > variables `LOCALCERT_*` >
    `.env` del proyecto > `.env` del usuario > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOCALCERT_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero, luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    mkcert_binary: str = Field(
        default="mkcert",
        min_length=1,
        description="Nombre o ruta del ejecutable mkcert.",
    )
    cert_file: Path = Field(
        default=Path("cert.pem"),
        description="Fichero de salida del certificado.",
    )
    key_file: Path = Field(
        default=Path("key.pem"),
        description="Fichero de salida de la clave privada.",
    )
    domains_file: Path = Field(
        default=Path(".domains"),
        description="Fichero con un dominio por línea (# para comentarios).",
    )
    force: bool = Field(
        default=False,
        description="No pedir confirmación antes de borrar certificados antiguos.",
    )
