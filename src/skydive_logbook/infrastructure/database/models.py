"""SQLAlchemy database models."""

from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class KeyValueModel(Base):
    """SQLAlchemy model for the key-prefix document store."""

    __tablename__ = "kv_store"

    # Keys are namespaced ("user:{id}", "jump:{user}:{id}", ...)
    key = Column(String(255), primary_key=True)
    value = Column(JSON, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<KeyValueModel(key='{self.key}')>"
