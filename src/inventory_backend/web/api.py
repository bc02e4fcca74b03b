# src/inventory_backend/web/api.py
from __future__ import annotations
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request

from inventory_backend.api.health_router import router as health_router
from inventory_backend.config.settings import AppSettings, get_settings
from inventory_backend.db.engine import build_engine, build_sessionmaker, create_schema
from inventory_backend.db.middleware import DBMiddleware
from inventory_backend.products.router import router as products_router
from inventory_backend.security.basic_auth import BasicAuthMiddleware, PUBLIC_ROUTES
from inventory_backend.web.errors import add_error_handlers


"""
──────────────────────────────────────────────────────────────
inventory_backend.web.api
──────────────────────────────────────────────────────────────
Purpose:
    FastAPI app factory for the inventory backend.

Responsibilities:
    • Own the async engine + sessionmaker (app.state)
    • Attach per-request DB session middleware
    • Enforce Basic authentication outside the public allowlist
    • Add CORS, request logging and global error handlers
    • Mount health and product routers
──────────────────────────────────────────────────────────────
"""


# ──────────────────────────────────────────────────────────────
# Request Logging Middleware
# ──────────────────────────────────────────────────────────────
class RequestLoggerMiddleware:
    """Logs method, path, outcome and timing. Credentials are never printed."""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        request = Request(scope, receive=receive)
        path = request.url.path
        start_time = time.time()
        auth = request.headers.get("authorization")
        auth_repr = f"{auth.split(' ', 1)[0]} ***" if auth else "<none>"
        print(f"🛰️ [REQ] {request.method} {path}")
        print(f"   ↳ Authorization: {auth_repr}")
        print(f"   ↳ Content-Type: {request.headers.get('content-type')}")

        status_holder = {"code": None}

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                status_holder["code"] = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            elapsed = (time.time() - start_time) * 1000
            print(f"🛰️ [RES] {request.method} {path} {status_holder['code']} ({elapsed:.2f} ms)")


def _lifespan(settings: AppSettings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.create_schema:
            await create_schema(app.state.engine)
        yield
        await app.state.engine.dispose()
        print("🧹 [kernel] DB engine disposed")

    return lifespan


# ──────────────────────────────────────────────────────────────
# App Factory
# ──────────────────────────────────────────────────────────────
def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Build the FastAPI app: DB, auth, CORS, errors, routers.
    Middleware added last runs first.
    """
    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name, lifespan=_lifespan(settings))
    app.state.settings = settings

    # ──────────────────────────────────────────────────────────
    # 🔹 Engine + per-request session
    # ──────────────────────────────────────────────────────────
    app.state.engine = build_engine(settings.database_url)
    app.state.async_sessionmaker = build_sessionmaker(app.state.engine)
    app.add_middleware(DBMiddleware)
    print(f"✅ [kernel] DB middleware active for {app.state.engine.url.render_as_string(hide_password=True)}")

    # ──────────────────────────────────────────────────────────
    # 🔹 Global Error Handlers (wrap DB middleware so rollback runs first)
    # ──────────────────────────────────────────────────────────
    add_error_handlers(app)
    print("✅ [kernel] Global error handlers registered")

    # ──────────────────────────────────────────────────────────
    # 🔹 Basic authentication
    # ──────────────────────────────────────────────────────────
    app.add_middleware(
        BasicAuthMiddleware,
        credential=settings.credential(),
        realm=settings.app_name,
        allowlist=PUBLIC_ROUTES,
    )
    print(f"✅ [kernel] Basic auth active (public: {[f'{m} {p}' for m, p in PUBLIC_ROUTES]})")

    # ──────────────────────────────────────────────────────────
    # 🔹 Request Logger
    # ──────────────────────────────────────────────────────────
    if settings.enable_request_logging:
        app.add_middleware(RequestLoggerMiddleware)
        print("✅ [kernel] Request logger active")

    # ──────────────────────────────────────────────────────────
    # 🔹 CORS Setup
    # ──────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    print("✅ [kernel] CORS enabled")

    # ──────────────────────────────────────────────────────────
    # 🔹 Routers
    # ──────────────────────────────────────────────────────────
    mount_routers(app, [health_router, products_router])
    print("✅ [kernel] Health + product routers mounted")

    print("🧩 FINAL MIDDLEWARE STACK:")
    for mw in app.user_middleware:
        print("   -", mw.cls.__name__)

    print(f"🚀 [kernel] App '{settings.app_name}' ready.")
    return app


# ──────────────────────────────────────────────────────────────
# Router Helper
# ──────────────────────────────────────────────────────────────
def mount_routers(app: FastAPI, routers: list) -> None:
    """Mount multiple routers safely."""
    for r in routers:
        app.include_router(r)
