# inventory_backend/db/engine.py
"""
Async Engine / Session Factory
────────────────────────────────────────────
This module isolates engine/sessionmaker creation.

Used by:
    • web.api (app factory + lifespan)
    • testing.fixtures (per-test engines)
"""

from __future__ import annotations
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from inventory_backend.db.base import Base


def normalize_async_url(url: str) -> str:
    """Map plain driver URLs onto their asyncio drivers."""
    if not url:
        raise RuntimeError("DATABASE_URL not set")
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


def build_engine(url: str) -> AsyncEngine:
    url = normalize_async_url(url)
    if url.startswith("sqlite"):
        return create_async_engine(url)
    return create_async_engine(url, pool_pre_ping=True)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def create_schema(engine: AsyncEngine) -> None:
    """Create every table registered on Base.metadata (no-op for existing ones)."""
    # models must be imported so their tables are on the metadata
    import inventory_backend.products.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    print(f"✅ [kernel] Schema ready → {list(Base.metadata.tables.keys())}")
