# inventory_backend/__init__.py
"""
inventory_backend
──────────────────────────────────────────────────────────────
Inventory REST backend on FastAPI + SQLAlchemy (asyncio).
Provides:
    - Product CRUD under /api/products
    - HTTP Basic authentication (single configured user)
    - Public liveness check at GET /api/health
    - Per-request AsyncSession lifecycle
──────────────────────────────────────────────────────────────
"""

__version__ = "0.1.0"

from inventory_backend.web.api import create_app, mount_routers

__all__ = [
    "create_app",
    "mount_routers",
]
