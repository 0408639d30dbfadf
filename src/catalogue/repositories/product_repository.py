# src/catalogue/repositories/product_repository.py
from __future__ import annotations

from catalogue.domain.models import Product
from catalogue.repositories.base import AbstractProductRepository


class InMemoryProductRepository(AbstractProductRepository):
    """
    Ordered in-memory product store.
    Uniqueness of ids is the caller's responsibility (see Catalogue.add_product).
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = list(products or [])

    def find_by_id(self, product_id: str) -> Product | None:
        return next((p for p in self._products if p.id == product_id), None)

    def find_all(self) -> list[Product]:
        return list(self._products)

    def append(self, product: Product) -> Product:
        self._products.append(product)
        return product

    def delete(self, product_id: str) -> bool:
        # Rebuild by filtering rather than removing in place
        remaining = [p for p in self._products if p.id != product_id]
        deleted = len(remaining) != len(self._products)
        self._products = remaining
        return deleted

    def __len__(self) -> int:
        return len(self._products)
