"""
Built-in routers.
──────────────────────────────────────────────────────────────
Currently includes:
 - /api/health
 - /api/health/db
──────────────────────────────────────────────────────────────
"""
from .health_router import router as health_router

__all__ = ["health_router"]
