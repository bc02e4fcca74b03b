# inventory_backend/services/base_service.py
"""
Base class for all domain services
──────────────────────────────────────────────
Responsibilities:
    • Hold the AsyncSession the service works on (injected, or the
      request-scoped one from the ContextVar)
    • Offer commit()/rollback() for code outside @transactional
──────────────────────────────────────────────
"""
from __future__ import annotations
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_backend.db.context import get_session


class BaseService:
    def __init__(self, session: AsyncSession | None = None):
        # Use injected session or existing request session (middleware)
        self.session: AsyncSession = session or get_session()

    async def commit(self) -> None:
        """Manually commit the current session."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Manually rollback the current session."""
        await self.session.rollback()
