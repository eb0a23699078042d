"""
Configuration helpers for the citizen portal backend.

Exposes a Settings object read from environment variables (storage backend,
data file path, CORS origins, logging level, ...) so that routers/services do
not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_file: str
    storage_backend: str
    database_url: str
    cors_origins: tuple[str, ...]
    static_dir: str
    log_level: str
    host: str
    port: int
    strict_reads: bool
    serialize_writes: bool

    @property
    def is_production(self) -> bool:
        return self.app_env == "prod"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            return default
        items = tuple(item.strip() for item in value.split(",") if item.strip())
        return items or default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_file=os.getenv("DATA_FILE", "users.json"),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "json").strip().lower(),
        database_url=os.getenv("DATABASE_URL", ""),
        cors_origins=_list(os.getenv("CORS_ORIGINS"), ("*",)),
        static_dir=os.getenv("STATIC_DIR", "public"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        strict_reads=_bool(os.getenv("STRICT_READS"), False),
        serialize_writes=_bool(os.getenv("SERIALIZE_WRITES"), True),
    )
