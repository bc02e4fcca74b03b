# inventory_backend/db/context.py
"""
ContextVar-based AsyncSession management
──────────────────────────────────────────────
• Each request binds one AsyncSession via DBMiddleware
• get_session() retrieves it; raises if none bound
• clear_session() cleans up after request
• set_session() / reset_session() allow manual binding for CLI/tests
"""
from contextvars import ContextVar, Token
from sqlalchemy.ext.asyncio import AsyncSession

_session_cv: ContextVar[AsyncSession | None] = ContextVar("_inv_session", default=None)


def set_session(session: AsyncSession) -> Token:
    """Bind an AsyncSession to current coroutine context."""
    return _session_cv.set(session)


def reset_session(token: Token) -> None:
    """Restore the binding that was active before set_session()."""
    _session_cv.reset(token)


def get_session() -> AsyncSession:
    """Return the current AsyncSession or raise if none bound."""
    session = _session_cv.get()
    if session is None:
        raise RuntimeError(
            "No active AsyncSession found. "
            "Did you enable DBMiddleware or call set_session()?"
        )
    return session


def clear_session() -> None:
    """Clear ContextVar binding (usually called by middleware)."""
    _session_cv.set(None)
