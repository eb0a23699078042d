"""Database helpers (engine/session export)."""

from .session import Base, dispose_engines, get_engine, get_session, resolve_database_url

__all__ = ["Base", "dispose_engines", "get_engine", "get_session", "resolve_database_url"]
