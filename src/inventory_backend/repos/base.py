"""
Generic Repository Base
────────────────────────────────────────────
Focus:
    • CRUD keyed by numeric identity on one AsyncSession
    • Session passed in explicitly, or the one bound to the current request
    • save() inserts when id is absent, overwrites the full row otherwise
────────────────────────────────────────────
"""
from __future__ import annotations

from typing import TypeVar, Generic, Type, Optional, Sequence, Any
from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_backend.db.context import get_session
from inventory_backend.exceptions import EntityNotFound

T = TypeVar("T")


class RepoBase(Generic[T]):
    """Generic repository providing async CRUD helpers."""

    # Each subclass must set this:
    model: Optional[Type[T]] = None

    def __init_subclass__(cls) -> None:
        if cls.model is None:
            raise RuntimeError(f"{cls.__name__} must define class attr `model`")

    def __init__(self, session: AsyncSession | None = None):
        # Use the injected session or the request-scoped one. Raises if none bound.
        self.session: AsyncSession = session or get_session()

    # ------------------------------------------------------------------
    # CRUD operations
    # ------------------------------------------------------------------
    async def find_all(self) -> Sequence[T]:
        res = await self.session.execute(select(self.model).order_by(self.model.id))
        return res.scalars().all()

    async def find_by_id(self, id_: Any) -> Optional[T]:
        return await self.session.get(self.model, id_)

    async def save(self, obj: T) -> T:
        if obj.id is None:
            self.session.add(obj)
            await self.session.flush()  # populate PK
            return obj

        if await self.find_by_id(obj.id) is None:
            # never let a client-chosen id create a row
            raise EntityNotFound(self.model.__name__, obj.id)
        merged = await self.session.merge(obj)
        await self.session.flush()
        return merged

    async def delete_by_id(self, id_: Any) -> int:
        res = await self.session.execute(delete(self.model).where(self.model.id == id_))
        return int(res.rowcount or 0)

    async def count(self) -> int:
        res = await self.session.execute(select(func.count()).select_from(self.model))
        return int(res.scalar_one())
