# inventory_backend/security/deps.py
from __future__ import annotations

from typing import List
from fastapi import Request, HTTPException, status
from inventory_backend.security.principal import Principal


def get_principal(request: Request) -> Principal:
    """
    Access the authenticated Principal injected by BasicAuthMiddleware.
    Raises 401 if not found (should never happen if middleware is active).
    """
    principal: Principal | None = getattr(request.state, "principal", None)
    if principal is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return principal


def require_roles(allowed: List[str]):
    """
    Role-based access dependency for routers.

    Usage:
        router = APIRouter(dependencies=[Depends(require_roles(["USER"]))])
    """
    allowed_set = set(allowed or [])

    async def _check_roles(request: Request) -> Principal:
        principal = get_principal(request)
        if not principal.has_role(*allowed_set):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden",
            )
        return principal

    return _check_roles
