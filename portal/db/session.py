"""
Engine/session registry for the SQL backend.

Engines are keyed by database URL so several stores (an app under test, a
migration script) can point at different databases in one process.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from portal.core.config import get_settings

Base = declarative_base()

_engines: dict[str, Engine] = {}
_sessionmakers: dict[str, sessionmaker] = {}
_registry_lock = threading.Lock()


def resolve_database_url(url: str | None = None) -> str:
    """Use the given URL, or DATABASE_URL when none is passed."""
    value = get_settings().database_url if url is None else url
    value = (value or "").strip()
    if not value:
        raise RuntimeError("A database URL (DATABASE_URL) is required for the SQL backend.")
    return value


def get_engine(url: str | None = None) -> Engine:
    resolved = resolve_database_url(url)
    with _registry_lock:
        engine = _engines.get(resolved)
        if engine is None:
            # request handlers run in a thread pool
            connect_args = {"check_same_thread": False} if resolved.startswith("sqlite") else {}
            engine = create_engine(resolved, future=True, pool_pre_ping=True, connect_args=connect_args)
            _engines[resolved] = engine
            _sessionmakers[resolved] = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
        return engine


@contextmanager
def get_session(url: str | None = None) -> Iterator[Session]:
    resolved = resolve_database_url(url)
    get_engine(resolved)
    session: Session = _sessionmakers[resolved]()
    try:
        yield session
    finally:
        session.close()


def dispose_engines() -> None:
    """Close every pooled connection and forget the cached engines."""
    with _registry_lock:
        for engine in _engines.values():
            engine.dispose()
        _engines.clear()
        _sessionmakers.clear()
