"""SQLAlchemy model mirroring the JSON user-record structure."""
from __future__ import annotations

from sqlalchemy import BigInteger, Column, Integer, String, Text

from .session import Base


class Registration(Base):
    __tablename__ = "registrations"

    # insertion order of the collection; rewritten on every save
    position = Column(Integer, primary_key=True, autoincrement=False)
    id = Column(BigInteger, unique=True, nullable=False)
    name = Column(Text, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    mobile = Column(String(32), nullable=False)
    location = Column(Text, nullable=False)
    registered_at = Column(String(40), nullable=False)
