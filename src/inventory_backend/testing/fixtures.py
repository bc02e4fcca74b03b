"""
──────────────────────────────────────────────────────────────────────────────
inventory_backend.testing.fixtures
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Reusable pytest fixtures.

Exports:
    - app_settings  → AppSettings pointing at a per-test SQLite file
    - async_session  → AsyncSession bound to the ContextVar, schema created
    - app            → FastAPI app built from app_settings, schema created
    - client         → httpx.AsyncClient talking to `app` in-process
    - auth_headers   → Authorization header for the configured user
    - basic_auth_header(user, pw) → build any Basic header

Usage in your tests (conftest.py):
    from inventory_backend.testing import app, app_settings, client, auth_headers  # noqa: F401

    async def test_list(client, auth_headers):
        res = await client.get("/api/products", headers=auth_headers)
        assert res.status_code == 200
──────────────────────────────────────────────────────────────────────────────
"""

import base64

import httpx
import pytest

from inventory_backend.config.settings import AppSettings
from inventory_backend.db.engine import build_engine, build_sessionmaker, create_schema
from inventory_backend.db.session import bound_session
from inventory_backend.web.api import create_app


def basic_auth_header(username: str, password: str) -> dict:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


@pytest.fixture()
def app_settings(tmp_path) -> AppSettings:
    """Settings isolated from the developer's .env and environment."""
    return AppSettings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        app_name="Inventory Test",
        auth_username="demo",
        auth_password="password",
        auth_role="USER",
        enable_request_logging=False,
    )


@pytest.fixture()
async def async_session(app_settings):
    """Provide a clean AsyncSession for each test, bound via set_session()."""
    engine = build_engine(app_settings.database_url)
    await create_schema(engine)
    async with bound_session(build_sessionmaker(engine)) as session:
        yield session
    await engine.dispose()


@pytest.fixture()
async def app(app_settings):
    """App built from app_settings. ASGITransport skips lifespan, so tables are created here."""
    application = create_app(app_settings)
    await create_schema(application.state.engine)
    yield application
    await application.state.engine.dispose()


@pytest.fixture()
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest.fixture()
def auth_headers(app_settings) -> dict:
    return basic_auth_header(app_settings.auth_username, app_settings.auth_password)
