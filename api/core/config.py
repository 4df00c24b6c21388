"""
Runtime settings, read from the environment.

One `Settings` value describes a deployment (local, container host or
serverless). A `.env` file in the working directory is loaded first when
present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import parse_qsl, quote, urlsplit

from dotenv import load_dotenv

DEFAULT_PORT = 3000
DEFAULT_POOL_MAX_SIZE = 10
DEFAULT_MAX_BODY_BYTES = 50 * 1024 * 1024  # 50 MiB, base64 images travel in JSON

_TRUE_VALUES = {"1", "true", "yes", "on"}
_TLS_SSLMODES = {"require", "verify-ca", "verify-full"}


@dataclass(frozen=True)
class Settings:
    database_url: str = ""
    require_tls: bool = False
    pool_min_size: int = 1
    pool_max_size: int = DEFAULT_POOL_MAX_SIZE
    command_timeout: float = 30.0
    allowed_origins: tuple[str, ...] = ("*",)
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES
    apply_schema: bool = False
    log_level: str = "INFO"

    @property
    def allows_any_origin(self) -> bool:
        return "*" in self.allowed_origins


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in _TRUE_VALUES


def _database_url_from_parts() -> str:
    host = _env_str("DB_HOST")
    if not host:
        return ""
    user = quote(_env_str("DB_USER"), safe="")
    password = quote(_env_str("DB_PASSWORD"), safe="")
    port = _env_str("DB_PORT", "5432")
    name = _env_str("DB_NAME")

    credentials = user
    if password:
        credentials = f"{user}:{password}"
    if credentials:
        credentials += "@"
    return f"postgresql://{credentials}{host}:{port}/{name}"


def url_requires_tls(url: str) -> bool:
    query = urlsplit(url).query
    if not query:
        return False
    params = dict(parse_qsl(query, keep_blank_values=True))
    return params.get("sslmode", "").strip().lower() in _TLS_SSLMODES


def parse_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(part.strip() for part in raw.split(",") if part.strip())
    return origins or ("*",)


def load_settings() -> Settings:
    load_dotenv()

    database_url = _env_str("DATABASE_URL") or _database_url_from_parts()
    return Settings(
        database_url=database_url,
        require_tls=_env_bool("DB_SSL") or url_requires_tls(database_url),
        pool_min_size=max(0, _env_int("DB_POOL_MIN", 1)),
        pool_max_size=max(1, _env_int("DB_POOL_MAX", DEFAULT_POOL_MAX_SIZE)),
        command_timeout=_env_float("DB_COMMAND_TIMEOUT", 30.0),
        allowed_origins=parse_origins(os.environ.get("CORS_ALLOW_ORIGINS", "*")),
        host=_env_str("HOST", "0.0.0.0"),
        port=_env_int("PORT", DEFAULT_PORT),
        max_body_bytes=_env_int("MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES),
        apply_schema=_env_bool("DB_APPLY_SCHEMA"),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
    )
