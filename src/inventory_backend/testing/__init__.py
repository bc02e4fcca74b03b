"""
Testing utilities for inventory_backend.
──────────────────────────────────────────────────────────────
Provides pytest fixtures for isolated async DB sessions and an
HTTP client bound to a fresh app.
──────────────────────────────────────────────────────────────
"""
from .fixtures import (
    app,
    async_session,
    auth_headers,
    basic_auth_header,
    client,
    app_settings,
)

__all__ = [
    "app",
    "async_session",
    "auth_headers",
    "basic_auth_header",
    "client",
    "app_settings",
]
