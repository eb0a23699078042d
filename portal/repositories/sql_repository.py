"""User-record store backed by SQLAlchemy."""
from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from portal.core.logging import get_logger
from portal.db.create_tables import create_all
from portal.db.models import Registration
from portal.db.session import get_session, resolve_database_url
from portal.repositories.base import StorageReadError

logger = get_logger(__name__)


def _entity_to_record(entity: Registration) -> dict:
    return {
        "id": int(entity.id),
        "name": entity.name,
        "email": entity.email,
        "mobile": entity.mobile,
        "location": entity.location,
        "registeredAt": entity.registered_at,
    }


def _record_to_entity(position: int, record: dict) -> Registration:
    return Registration(
        position=position,
        id=int(record["id"]),
        name=str(record.get("name") or ""),
        email=str(record.get("email") or ""),
        mobile=str(record.get("mobile") or ""),
        location=str(record.get("location") or ""),
        registered_at=str(record.get("registeredAt") or ""),
    )


class SQLUserRepository:
    """Same whole-collection contract as the JSON file, stored in one table."""

    def __init__(self, database_url: str | None = None) -> None:
        self.database_url = resolve_database_url(database_url)

    def initialize(self) -> None:
        create_all(self.database_url)

    def load_all(self) -> list[dict]:
        try:
            with get_session(self.database_url) as session:
                stmt = select(Registration).order_by(Registration.position)
                return [_entity_to_record(entity) for entity in session.execute(stmt).scalars().all()]
        except SQLAlchemyError as exc:
            raise StorageReadError(f"Cannot read registrations: {exc}") from exc

    def save_all(self, records: Sequence[dict]) -> bool:
        with get_session(self.database_url) as session:
            try:
                session.execute(delete(Registration))
                session.add_all([_record_to_entity(pos, record) for pos, record in enumerate(records)])
                session.commit()
            except (SQLAlchemyError, KeyError, TypeError, ValueError):
                session.rollback()
                logger.error("Error writing registrations", exc_info=True)
                return False
        return True
