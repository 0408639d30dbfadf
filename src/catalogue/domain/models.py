# src/catalogue/domain/models.py
from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Aggregate: Product
# ---------------------------------------------------------------------------


class Product(BaseModel):
    """
    A single stocked item.
    Identity is the `id` alone; fields stay mutable after construction.
    """

    id: str = Field(description="Unique key within a catalogue")
    name: str
    quantity_in_stock: int = Field(description="Units currently in stock")
    reorder_level: int = Field(description="Stock level at or below which a reorder is due")
    # Unpriced products never match a price search
    price: Decimal | None = None

    @classmethod
    def create(
        cls,
        id: str,
        name: str,
        quantity_in_stock: int,
        reorder_level: int,
        price: Decimal | float | None = None,
    ) -> Product:
        """Positional constructor in catalogue field order."""
        return cls(
            id=id,
            name=name,
            quantity_in_stock=quantity_in_stock,
            reorder_level=reorder_level,
            price=price,
        )

    @property
    def needs_reorder(self) -> bool:
        return self.quantity_in_stock <= self.reorder_level


# ---------------------------------------------------------------------------
# Batch & Reports
# ---------------------------------------------------------------------------


class Batch(BaseModel):
    type: str = "Batch"
    products: list[Product] = Field(default_factory=list)


class ReorderReport(BaseModel):
    type: Literal["Reorder"] = "Reorder"
    product_ids: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Search Criteria
# ---------------------------------------------------------------------------


class PriceAtMost(BaseModel):
    kind: Literal["price"] = "price"
    price: Decimal = Field(allow_inf_nan=False, description="Inclusive upper bound")

    model_config = {"frozen": True}


class KeywordMatch(BaseModel):
    kind: Literal["keyword"] = "keyword"
    # Any value is accepted; it only matters when no keyword override is configured
    keyword: Any = None

    model_config = {"frozen": True}


SearchCriteria = Annotated[PriceAtMost | KeywordMatch, Field(discriminator="kind")]
