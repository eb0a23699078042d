"""Create the registrations schema: `python -m portal.db.create_tables [--database-url URL]`."""
from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers the Registration table on Base.metadata


def create_all(url: str | None = None) -> None:
    Base.metadata.create_all(bind=get_engine(url))


def main() -> None:
    ap = argparse.ArgumentParser(description="Create the portal database tables")
    ap.add_argument("--database-url", help="SQLAlchemy URL (default: DATABASE_URL)")
    args = ap.parse_args()
    try:
        create_all(args.database_url)
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print("Database tables created successfully.")


if __name__ == "__main__":
    main()
