# inventory_backend/exceptions.py
from __future__ import annotations
from typing import Any, Sequence


class InventoryError(Exception):
    """Base class for errors raised by services and repositories."""


class EntityNotFound(InventoryError):
    def __init__(self, entity: str, id_: Any):
        super().__init__(f"{entity} {id_} not found")
        self.entity = entity
        self.id = id_


class ProductNotFound(EntityNotFound):
    def __init__(self, id_: Any):
        super().__init__("Product", id_)


class ValidationFailed(InventoryError, ValueError):
    """Raised with the list of FieldViolation found on a payload."""

    def __init__(self, violations: Sequence[Any]):
        super().__init__("Validation failed")
        self.violations = list(violations)
