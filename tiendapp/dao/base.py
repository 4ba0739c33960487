"""
Generic access object - Data Access Layer
"""
import asyncio
import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import delete, desc, func, select

from tiendapp.database import Base, Store
from tiendapp.reactive import LiveQuery

logger = logging.getLogger(__name__)

RowT = TypeVar("RowT", bound=Base)
EntityT = TypeVar("EntityT", bound=BaseModel)


class BaseDao(Generic[RowT, EntityT]):
    """
    Typed CRUD over one table

    Every public operation is a coroutine; the blocking session work runs
    on a worker thread. Mutations that touched a row announce the table on
    the store notifier after commit. Store failures surface as StorageError.
    """

    row_type: Type[RowT]
    entity_type: Type[EntityT]

    def __init__(self, store: Store):
        self.store = store

    @property
    def table(self) -> str:
        return self.row_type.__tablename__

    def ordering(self) -> Sequence[Any]:
        """Columns used by list queries, newest first"""
        return (desc(self.row_type.id),)

    def _row_data(self, entity: EntityT) -> Dict[str, Any]:
        return entity.model_dump(mode="json")

    def _to_entity(self, row: RowT) -> EntityT:
        return self.entity_type.model_validate(row)

    def _changed(self) -> None:
        self.store.notifier.publish(self.table)

    # Insert

    async def insert(self, entity: EntityT) -> int:
        """Insert entity, replacing any row with the same key; returns the key"""
        keys = await asyncio.to_thread(self._insert_sync, [entity])
        self._changed()
        return keys[0]

    async def insert_all(self, entities: Sequence[EntityT]) -> List[int]:
        """Insert all entities in one transaction"""
        if not entities:
            return []
        keys = await asyncio.to_thread(self._insert_sync, list(entities))
        self._changed()
        return keys

    def _insert_sync(self, entities: List[EntityT]) -> List[int]:
        with self.store.session() as db:
            rows = []
            for entity in entities:
                data = self._row_data(entity)
                if data.get("id"):
                    rows.append(db.merge(self.row_type(**data)))
                else:
                    data.pop("id", None)
                    row = self.row_type(**data)
                    db.add(row)
                    rows.append(row)
            db.commit()
            return [row.id for row in rows]

    # Update / delete

    async def update(self, entity: EntityT) -> bool:
        """Overwrite the row with entity's key; False when no such row"""
        updated = await asyncio.to_thread(self._update_sync, entity)
        if updated:
            self._changed()
        return updated

    def _update_sync(self, entity: EntityT) -> bool:
        with self.store.session() as db:
            row = db.get(self.row_type, entity.id)
            if row is None:
                logger.debug("Update skipped, %s id=%s not found", self.table, entity.id)
                return False
            for field, value in self._row_data(entity).items():
                setattr(row, field, value)
            db.commit()
            return True

    async def delete(self, entity: EntityT) -> bool:
        """Delete the row with entity's key; False when no such row"""
        deleted = await asyncio.to_thread(self._delete_sync, entity.id)
        if deleted:
            self._changed()
        return deleted

    def _delete_sync(self, key: int) -> bool:
        with self.store.session() as db:
            row = db.get(self.row_type, key)
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True

    async def delete_all(self) -> None:
        await asyncio.to_thread(self._delete_all_sync)
        self._changed()

    def _delete_all_sync(self) -> None:
        with self.store.session() as db:
            db.execute(delete(self.row_type))
            db.commit()

    # Queries

    async def get_by_id(self, key: int) -> Optional[EntityT]:
        return await asyncio.to_thread(self._get_sync, key)

    def _get_sync(self, key: int) -> Optional[EntityT]:
        with self.store.session() as db:
            row = db.get(self.row_type, key)
            return self._to_entity(row) if row is not None else None

    async def count(self) -> int:
        return await asyncio.to_thread(self._count_sync)

    def _count_sync(self) -> int:
        with self.store.session() as db:
            return db.scalar(select(func.count()).select_from(self.row_type)) or 0

    def get_all(self) -> LiveQuery[EntityT]:
        """Reactive list of every row, newest first"""
        return self.live()

    def live(self, *criteria) -> LiveQuery[EntityT]:
        """Reactive list of rows matching criteria"""
        return LiveQuery(self.store.notifier, [self.table], lambda: self._select_sync(*criteria))

    def _select_sync(self, *criteria) -> List[EntityT]:
        with self.store.session() as db:
            stmt = select(self.row_type)
            if criteria:
                stmt = stmt.where(*criteria)
            stmt = stmt.order_by(*self.ordering())
            return [self._to_entity(row) for row in db.scalars(stmt)]

    def _first_sync(self, *criteria) -> Optional[EntityT]:
        with self.store.session() as db:
            stmt = select(self.row_type).where(*criteria).order_by(self.row_type.id).limit(1)
            row = db.scalars(stmt).first()
            return self._to_entity(row) if row is not None else None
