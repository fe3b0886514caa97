"""SQLAlchemy store implementation."""

from typing import Any, Dict, List, Optional

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from skydive_logbook.application.ports.repositories import KeyValueStore
from skydive_logbook.infrastructure.database.models import KeyValueModel
from skydive_logbook.infrastructure.logging import get_logger, log_database_operation


class SQLAlchemyKeyValueStore(KeyValueStore):
    """Key-prefix store backed by the kv_store table."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self._logger = get_logger(__name__)

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Get the value stored under a key."""
        log_database_operation(self._logger, "SELECT", "kv_store", kv_key=key)

        model = await self._session.get(KeyValueModel, key)
        return dict(model.value) if model else None

    async def set(self, key: str, value: Dict[str, Any]) -> None:
        """Insert or replace the value stored under a key."""
        log_database_operation(self._logger, "UPSERT", "kv_store", kv_key=key)

        model = await self._session.get(KeyValueModel, key)
        if model:
            model.value = value
        else:
            self._session.add(KeyValueModel(key=key, value=value))

        await self._session.flush()

    async def delete(self, key: str) -> bool:
        """Delete a key."""
        log_database_operation(self._logger, "DELETE", "kv_store", kv_key=key)

        result = await self._session.execute(
            delete(KeyValueModel).where(KeyValueModel.key == key)
        )
        success = result.rowcount > 0
        if not success:
            self._logger.debug("Delete skipped - key not found", extra={"kv_key": key})
        return success

    async def get_by_prefix(self, prefix: str) -> List[Dict[str, Any]]:
        """Get all values whose key starts with prefix, in key order."""
        log_database_operation(self._logger, "SELECT", "kv_store", kv_prefix=prefix)

        stmt = (
            select(KeyValueModel)
            .where(KeyValueModel.key.startswith(prefix, autoescape=True))
            .order_by(KeyValueModel.key)
        )
        result = await self._session.execute(stmt)
        return [dict(model.value) for model in result.scalars().all()]
