# inventory_backend/products/service.py
from __future__ import annotations
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from inventory_backend.db.tx import transactional
from inventory_backend.exceptions import ProductNotFound
from inventory_backend.products.models import Product
from inventory_backend.products.repo import ProductRepo
from inventory_backend.products.schemas import ProductIn
from inventory_backend.services.base_service import BaseService


class ProductService(BaseService):
    """
    Product use cases on top of ProductRepo.

    Callers are expected to pass payloads that already went through
    ensure_valid(); the service does not re-check field constraints.
    """

    def __init__(self, session: AsyncSession | None = None, repo: ProductRepo | None = None):
        super().__init__(session)
        self.repo = repo or ProductRepo(self.session)

    async def find_all(self) -> List[Product]:
        return list(await self.repo.find_all())

    @transactional
    async def create(self, candidate: ProductIn) -> Product:
        product = Product(name=candidate.name, price=candidate.price, stock=candidate.stock)
        return await self.repo.save(product)

    @transactional
    async def update(self, id_: int, candidate: ProductIn) -> Product:
        existing = await self.repo.find_by_id(id_)
        if existing is None:
            raise ProductNotFound(id_)
        existing.name = candidate.name
        existing.price = candidate.price
        existing.stock = candidate.stock
        return await self.repo.save(existing)

    @transactional
    async def delete(self, id_: int) -> None:
        # deleting an unknown id is a silent no-op
        await self.repo.delete_by_id(id_)
