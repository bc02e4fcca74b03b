# inventory_backend/db/session.py
"""
Lightweight AsyncSession helpers
────────────────────────────────────────────
Safe to call outside a request (CLI, tests).
"""
from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory_backend.db.context import set_session, reset_session


@asynccontextmanager
async def bound_session(sm: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    """Open a session and bind it to the ContextVar for the duration of the block."""
    async with sm() as sess:
        token = set_session(sess)
        try:
            yield sess
        finally:
            reset_session(token)


async def healthcheck(session: AsyncSession) -> bool:
    await session.execute(text("SELECT 1"))
    return True
