# src/tareas_api/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets required at import time (the signing secret is checked when
  the auth service is built).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TAREAS"


class ConfigError(RuntimeError):
    """Raised when a required setting is missing or unusable."""


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- HTTP ----
    host: str
    port: int

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    users_path: Path

    # ---- Auth ----
    jwt_secret: str | None
    jwt_algorithm: str
    token_ttl_seconds: int
    bcrypt_rounds: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tareas-api") or "tareas-api"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        host = _env(_k("HOST"), "0.0.0.0")
        port = _env_int(_k("PORT"), 3000)

        data_dir = _env_path(_k("DATA_DIR"), Path("data"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tareas.json")
        users_path = _env_path(_k("USERS_PATH"), data_dir / "usuarios.json")

        # Accept the bare JWT_SECRET name too; it is what most deployments already export.
        jwt_secret = _first_env(_k("JWT_SECRET"), "JWT_SECRET", default=None)
        jwt_algorithm = _env(_k("JWT_ALGORITHM"), "HS256")
        token_ttl_seconds = _env_int(_k("TOKEN_TTL_SECONDS"), 3600)
        # bcrypt accepts 4..31
        bcrypt_rounds = max(4, min(31, _env_int(_k("BCRYPT_ROUNDS"), 10)))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            host=host,
            port=port,
            data_dir=data_dir,
            tasks_path=tasks_path,
            users_path=users_path,
            jwt_secret=jwt_secret,
            jwt_algorithm=jwt_algorithm,
            token_ttl_seconds=token_ttl_seconds,
            bcrypt_rounds=bcrypt_rounds,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, reading .env and the environment once."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
