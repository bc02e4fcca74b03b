"""
──────────────────────────────────────────────────────────────────────────────
BasicAuthMiddleware: HTTP Basic authentication for every route
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Reject any request that does not carry the configured credential,
    except the (method, path) pairs on the public allowlist.

Behaviour:
    - allowlisted request         → forwarded untouched
    - valid `Authorization: Basic` → request.state.principal set, forwarded
    - anything else               → 401 + WWW-Authenticate, generic body

There is no CSRF protection: the API is stateless, issues no cookies or
sessions, and every request authenticates from its own header.
──────────────────────────────────────────────────────────────────────────────
"""
from __future__ import annotations

import base64
import binascii
import secrets
from typing import Iterable, Optional, Set, Tuple

from starlette.requests import Request
from starlette.responses import JSONResponse

from inventory_backend.config.settings import Credential
from inventory_backend.security.principal import Principal
from inventory_backend.web.errors import error_envelope

PUBLIC_ROUTES: Tuple[Tuple[str, str], ...] = (("GET", "/api/health"),)


def parse_basic_authorization(header: Optional[str]) -> Optional[Tuple[str, str]]:
    """Return (username, password) from a Basic header, or None if unusable."""
    if not header:
        return None
    scheme, _, param = header.partition(" ")
    if scheme.lower() != "basic" or not param.strip():
        return None
    try:
        decoded = base64.b64decode(param.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return username, password


def credential_matches(credential: Credential, username: str, password: str) -> bool:
    # evaluate both comparisons so timing does not reveal which one failed
    user_ok = secrets.compare_digest(username.encode("utf-8"), credential.username.encode("utf-8"))
    pass_ok = secrets.compare_digest(password.encode("utf-8"), credential.password.encode("utf-8"))
    return user_ok and pass_ok


class BasicAuthMiddleware:
    def __init__(
        self,
        app,
        *,
        credential: Credential,
        realm: str = "inventory",
        allowlist: Iterable[Tuple[str, str]] = PUBLIC_ROUTES,
    ):
        self.app = app
        self.credential = credential
        self.realm = realm
        self.allowlist: Set[Tuple[str, str]] = {(m.upper(), p) for m, p in allowlist}

    def _unauthorized(self) -> JSONResponse:
        return JSONResponse(
            error_envelope("UNAUTHORIZED", "Authentication required"),
            status_code=401,
            headers={"WWW-Authenticate": f'Basic realm="{self.realm}"'},
        )

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        request = Request(scope, receive=receive)
        if (request.method.upper(), request.url.path) in self.allowlist:
            return await self.app(scope, receive, send)

        parsed = parse_basic_authorization(request.headers.get("authorization"))
        if parsed is None or not credential_matches(self.credential, *parsed):
            return await self._unauthorized()(scope, receive, send)

        request.state.principal = Principal.from_credential(self.credential)
        return await self.app(scope, receive, send)
