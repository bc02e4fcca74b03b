# inventory_backend/db/tx.py
"""
Transactional decorator for service methods
──────────────────────────────────────────────
Explicitly wraps a BaseService method in a commit/rollback boundary
on the service's own session.
"""
from functools import wraps


def transactional(fn):
    """Wraps async service methods in an explicit transaction."""
    @wraps(fn)
    async def wrapper(self, *args, **kwargs):
        try:
            result = await fn(self, *args, **kwargs)
            await self.commit()
            return result
        except Exception:
            await self.rollback()
            raise
    return wrapper
