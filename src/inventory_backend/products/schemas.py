# inventory_backend/products/schemas.py
from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

# JSON clients read price as a number, not pydantic's default decimal string
JsonDecimal = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class ProductIn(BaseModel):
    """
    Create/update payload as bound from the request body.

    Fields are optional at this level so missing values surface as field
    violations from validate_product() rather than binder errors.
    Any `id` sent by the client is dropped.
    """

    name: Optional[str] = Field(None, json_schema_extra={"example": "Widget"})
    price: Optional[Decimal] = Field(None, json_schema_extra={"example": 9.99})
    stock: Optional[int] = Field(None, json_schema_extra={"example": 5})

    model_config = ConfigDict(extra="ignore")


class ProductOut(BaseModel):
    id: int
    name: str
    price: JsonDecimal
    stock: int

    model_config = ConfigDict(from_attributes=True)
