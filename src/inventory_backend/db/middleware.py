# inventory_backend/db/middleware.py
from __future__ import annotations
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from inventory_backend.db.context import set_session, clear_session


class DBMiddleware(BaseHTTPMiddleware):
    """
    Unified per-request AsyncSession lifecycle middleware.

    Opens one session from `app.state.async_sessionmaker`, exposes it as
    `request.state.db` and through get_session(), commits after the handler
    returns and rolls back if it raised.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        session_factory = request.app.state.async_sessionmaker

        async with session_factory() as session:
            request.state.db = session
            set_session(session)
            try:
                response = await call_next(request)
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                clear_session()
        return response
