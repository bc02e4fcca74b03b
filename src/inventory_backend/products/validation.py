# inventory_backend/products/validation.py
"""
Field validation for Product payloads
──────────────────────────────────────────────
validate_product() is pure: it inspects a bound ProductIn and returns every
violated constraint. ensure_valid() raises ValidationFailed when the list is
not empty; routers call it before touching the service.
"""
from __future__ import annotations
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Dict, List

from inventory_backend.exceptions import ValidationFailed
from inventory_backend.products.schemas import ProductIn

NOT_BLANK = "must not be blank"
NOT_NULL = "must not be null"
NON_NEGATIVE = "must be greater than or equal to 0"
FINITE = "must be a finite number"
MAX_NAME_LENGTH = 255
# Numeric(12, 2) column: 10 integer digits, 2 fractional
PRICE_SCALE = 2
PRICE_LIMIT = Decimal(10) ** 10
MAX_STOCK = 2**31 - 1

TOO_LONG = f"size must be at most {MAX_NAME_LENGTH}"
TOO_PRECISE = f"must have at most {PRICE_SCALE} decimal places"
PRICE_TOO_LARGE = f"must be less than {PRICE_LIMIT}"
STOCK_TOO_LARGE = f"must be less than or equal to {MAX_STOCK}"


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def validate_product(payload: ProductIn) -> List[FieldViolation]:
    violations: List[FieldViolation] = []

    if payload.name is None or not payload.name.strip():
        violations.append(FieldViolation("name", NOT_BLANK))
    elif len(payload.name) > MAX_NAME_LENGTH:
        violations.append(FieldViolation("name", TOO_LONG))

    if payload.price is None:
        violations.append(FieldViolation("price", NOT_NULL))
    elif not payload.price.is_finite():
        violations.append(FieldViolation("price", FINITE))
    elif payload.price < 0:
        violations.append(FieldViolation("price", NON_NEGATIVE))
    elif payload.price.normalize().as_tuple().exponent < -PRICE_SCALE:
        violations.append(FieldViolation("price", TOO_PRECISE))
    elif payload.price >= PRICE_LIMIT:
        violations.append(FieldViolation("price", PRICE_TOO_LARGE))

    if payload.stock is None:
        violations.append(FieldViolation("stock", NOT_NULL))
    elif payload.stock < 0:
        violations.append(FieldViolation("stock", NON_NEGATIVE))
    elif payload.stock > MAX_STOCK:
        violations.append(FieldViolation("stock", STOCK_TOO_LARGE))

    return violations


def ensure_valid(payload: ProductIn) -> ProductIn:
    violations = validate_product(payload)
    if violations:
        raise ValidationFailed(violations)
    return payload
