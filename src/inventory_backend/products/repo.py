# inventory_backend/products/repo.py
from inventory_backend.products.models import Product
from inventory_backend.repos.base import RepoBase


class ProductRepo(RepoBase[Product]):
    model = Product
