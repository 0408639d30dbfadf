# tests/conftest.py
from decimal import Decimal

import pytest

from catalogue.core.config import Settings
from catalogue.domain.models import Batch, Product
from catalogue.services.catalogue import Catalogue


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def catalogue(test_settings: Settings) -> Catalogue:
    cat = Catalogue("Test Catalogue", settings=test_settings)
    cat.add_product(Product.create("A123", "Product 1", 100, 10, Decimal("10.0")))
    # Registered without a price
    cat.add_product(Product.create("A124", "Product 2", 100, 10))
    cat.add_product(Product.create("A125", "Product 3", 100, 10, Decimal("10.0")))
    return cat


@pytest.fixture
def batch() -> Batch:
    return Batch(
        products=[
            Product.create("A126", "Product 6", 100, 10, Decimal("10.0")),
            Product.create("A127", "Product 7", 100, 10, Decimal("10.0")),
        ]
    )


@pytest.fixture
def search_catalogue(test_settings: Settings) -> Catalogue:
    cat = Catalogue("Test Catalogue", settings=test_settings)
    cat.add_product(Product.create("C123", "shoes", 100, 10, Decimal("25.0")))
    cat.add_product(Product.create("C124", "shoulder bag", 100, 10, Decimal("10.0")))
    cat.add_product(Product.create("C125", "book", 100, 10, Decimal("30.0")))
    return cat
