"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y la CLI lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import SessionCredential


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias).

    Objetivo: guardar las cookies de sesión sin editar `.env` en el proyecto.
    """

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "nico-mylist"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "nico-mylist"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "nico-mylist"
    return Path.home() / ".config" / "nico-mylist"


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


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# nico-mylist user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    # Contiene cookies de sesión.
    if not sys.platform.startswith("win"):
        env_path.chmod(0o600)
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="NICO_MYLIST_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="nico-mylist/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las peticiones a nvapi.",
    )
    api_base_url: str = Field(
        default="https://nvapi.nicovideo.jp",
        min_length=8,
        description="Base URL de nvapi (sin barra final).",
    )
    frontend_id: str = Field(
        default="6",
        min_length=1,
        description="Valor de la cabecera `X-Frontend-Id` exigida por nvapi.",
    )

    user_session: SecretStr | None = Field(
        default=None,
        description="Cookie `user_session` de una sesión iniciada en niconico.",
    )
    user_session_secure: SecretStr | None = Field(
        default=None,
        description="Cookie `user_session_secure` de la misma sesión.",
    )

    sample_item_count: int = Field(
        default=0,
        ge=0,
        le=100,
        description="Items de muestra por mylist en el listado.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    log_file: Path | None = Field(
        default=None,
        description="Si se define, también se escribe el log en este fichero (rotativo).",
    )

    def session_credential(self) -> SessionCredential | None:
        """Construye la credencial de sesión si ambas cookies están configuradas."""

        if self.user_session is None or self.user_session_secure is None:
            return None
        session = self.user_session.get_secret_value()
        secure = self.user_session_secure.get_secret_value()
        if not session or not secure:
            return None
        return SessionCredential.from_values(session, secure)
