"""
──────────────────────────────────────────────────────────────
Health Router
──────────────────────────────────────────────────────────────
Purpose:
    Operational endpoints.
      GET /api/health     → liveness, public (allowlisted)
      GET /api/health/db  → DB round trip, authenticated

Exports:
    router → FastAPI APIRouter instance
──────────────────────────────────────────────────────────────
"""

import time
from fastapi import APIRouter, Request
from inventory_backend.db.session import healthcheck

_router_start_time = time.time()

router = APIRouter(prefix="/api/health", tags=["system"])


@router.get("")
async def health():
    """Simple health check endpoint."""
    return {"ok": True, "uptime": round(time.time() - _router_start_time, 1)}


@router.get("/db")
async def db_health(request: Request):
    """Verify DB connectivity using the request's AsyncSession."""
    try:
        await healthcheck(request.state.db)
        return {"db_ok": True}
    except Exception as e:
        return {"db_ok": False, "error": type(e).__name__}
