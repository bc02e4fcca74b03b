# inventory_backend/products/router.py
from __future__ import annotations
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Request, Response, status

from inventory_backend.products.schemas import ProductIn, ProductOut
from inventory_backend.products.service import ProductService
from inventory_backend.products.validation import ensure_valid
from inventory_backend.security.deps import require_roles

# ids are 64-bit integer primary keys
ProductId = Annotated[int, Path(ge=1, le=2**63 - 1)]

router = APIRouter(
    prefix="/api/products",
    tags=["products"],
    dependencies=[Depends(require_roles(["USER"]))],
)


def get_product_service(request: Request) -> ProductService:
    """Build the service on the session DBMiddleware opened for this request."""
    return ProductService(request.state.db)


@router.get("", response_model=List[ProductOut])
async def list_products(svc: ProductService = Depends(get_product_service)):
    return await svc.find_all()


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductIn, svc: ProductService = Depends(get_product_service)):
    return await svc.create(ensure_valid(payload))


@router.put("/{product_id}", response_model=ProductOut)
async def update_product(
    product_id: ProductId,
    payload: ProductIn,
    svc: ProductService = Depends(get_product_service),
):
    return await svc.update(product_id, ensure_valid(payload))


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: ProductId, svc: ProductService = Depends(get_product_service)):
    await svc.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
