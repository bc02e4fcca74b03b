# inventory_backend/web/errors.py
from __future__ import annotations
from fastapi import Request, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
import traceback

from inventory_backend.exceptions import EntityNotFound, ValidationFailed

_HTTP_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def error_envelope(code: str, message: str, details=None):
    return {"error": {"code": code, "message": message, "details": details or {}}}


def _binder_violations(exc: RequestValidationError):
    out = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        out.append({"field": ".".join(loc) or "body", "message": err.get("msg", "invalid")})
    return out


async def exception_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except ValidationFailed as e:
        return JSONResponse(
            error_envelope(
                "VALIDATION_ERROR",
                str(e),
                {"violations": [v.to_dict() for v in e.violations]},
            ),
            status_code=400,
        )
    except EntityNotFound as e:
        return JSONResponse(
            error_envelope("NOT_FOUND", str(e), {"entity": e.entity, "id": e.id}),
            status_code=404,
        )
    except IntegrityError:
        return JSONResponse(
            error_envelope("CONFLICT", "Integrity violation"), status_code=409
        )
    except ValueError as e:
        return JSONResponse(error_envelope("BAD_REQUEST", str(e)), status_code=400)
    except Exception:
        print("⚠️ Unexpected error:", traceback.format_exc())
        return JSONResponse(
            error_envelope("SERVER_ERROR", "Unexpected error"), status_code=500
        )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        error_envelope(
            "VALIDATION_ERROR",
            "Validation failed",
            {"violations": _binder_violations(exc)},
        ),
        status_code=400,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    code = _HTTP_CODES.get(exc.status_code, "HTTP_ERROR")
    return JSONResponse(
        error_envelope(code, str(exc.detail)),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def add_error_handlers(app: FastAPI) -> None:
    """Attach global exception middleware & handlers to app."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.middleware("http")(exception_middleware)
