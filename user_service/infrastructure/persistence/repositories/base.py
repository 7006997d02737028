"""Base repository: generic CRUD over one mapped model."""

from typing import Any

from sqlalchemy import delete as sa_delete, func, inspect as sa_inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from user_service.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Base repository with get_by_id, get_all, save, delete and exists_by_id.

    Every write flushes so generated keys and constraint errors surface
    inside the caller's transaction; committing is the session owner's job.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    @property
    def _pk_column(self) -> Any:
        return sa_inspect(self.model).primary_key[0]

    async def get_by_id(self, entity_id: int) -> ModelType | None:
        """Return a single record by primary key, or None."""
        result = await self.db.execute(
            select(self.model).where(self._pk_column == entity_id)
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> list[ModelType]:
        """Return all records ordered by primary key."""
        result = await self.db.execute(select(self.model).order_by(self._pk_column))
        return list(result.scalars().all())

    async def exists_by_id(self, entity_id: int) -> bool:
        """Return True when a row with this primary key exists."""
        result = await self.db.execute(
            select(func.count()).select_from(self.model).where(self._pk_column == entity_id)
        )
        return result.scalar_one() > 0

    async def save(self, obj: ModelType) -> ModelType:
        """Insert or update the record (merge if detached) and return it refreshed."""
        if obj not in self.db:
            pk = sa_inspect(obj).identity
            if pk is None:
                self.db.add(obj)
            else:
                obj = await self.db.merge(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record."""
        await self.db.delete(obj)
        await self.db.flush()

    async def delete_all(self) -> None:
        """Delete every row of this model (bulk statement, bypasses the ORM)."""
        await self.db.execute(sa_delete(self.model))
        await self.db.flush()
        self.db.expunge_all()
