from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catalogue.domain.models import Product


class AbstractProductRepository(ABC):
    @abstractmethod
    def find_by_id(self, product_id: str) -> Product | None:
        """Finds the first product with exactly this id."""
        ...

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Returns all products in insertion order."""
        ...

    @abstractmethod
    def append(self, product: Product) -> Product:
        """Appends a product to the end of the sequence without checks."""
        ...

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Deletes every product with this id. Returns True if any was deleted."""
        ...
