# src/catalogue/services/catalogue.py
from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from catalogue.core.config import Settings, get_settings
from catalogue.core.metrics import BATCH_PRODUCTS_ADDED, CATALOGUE_OPERATIONS, REORDER_FLAGGED
from catalogue.domain.exceptions import BadBatchError, BadSearchError
from catalogue.domain.models import (
    Batch,
    KeywordMatch,
    PriceAtMost,
    Product,
    ReorderReport,
    SearchCriteria,
)
from catalogue.repositories.base import AbstractProductRepository
from catalogue.repositories.product_repository import InMemoryProductRepository

logger = logging.getLogger(__name__)

_CRITERIA_ADAPTER: TypeAdapter[PriceAtMost | KeywordMatch] = TypeAdapter(SearchCriteria)


class Catalogue:
    """
    Ordered collection of products keyed by a unique id.

    Every public operation runs under one re-entrant lock per instance, so
    read-then-write sequences (removal, batch insertion) stay atomic when an
    instance is shared between threads.
    """

    def __init__(
        self,
        title: str | None = None,
        repository: AbstractProductRepository | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self.title = title if title is not None else self._settings.default_title
        self._repo = repository if repository is not None else InMemoryProductRepository()
        self._lock = threading.RLock()

    @property
    def products(self) -> list[Product]:
        with self._lock:
            return self._repo.find_all()

    def __len__(self) -> int:
        return len(self.products)

    def __repr__(self) -> str:
        return f"Catalogue(title={self.title!r}, products={len(self)})"

    def find_product_by_id(self, product_id: str) -> Product | None:
        with self._lock:
            product = self._repo.find_by_id(product_id)
        CATALOGUE_OPERATIONS.labels(
            operation="find", outcome="hit" if product is not None else "miss"
        ).inc()
        return product

    def add_product(self, product: Product) -> bool:
        """Appends the product unless its id is already present. Returns True if added."""
        with self._lock:
            if self._repo.find_by_id(product.id) is not None:
                CATALOGUE_OPERATIONS.labels(operation="add", outcome="duplicate").inc()
                return False
            self._repo.append(product)
        logger.debug("Added product '%s' to catalogue '%s'", product.id, self.title)
        CATALOGUE_OPERATIONS.labels(operation="add", outcome="added").inc()
        return True

    def remove_product_by_id(self, product_id: str) -> Product | None:
        with self._lock:
            removed = self._repo.find_by_id(product_id)
            if removed is not None:
                self._repo.delete(product_id)
        if removed is None:
            CATALOGUE_OPERATIONS.labels(operation="remove", outcome="miss").inc()
            return None
        logger.debug("Removed product '%s' from catalogue '%s'", product_id, self.title)
        CATALOGUE_OPERATIONS.labels(operation="remove", outcome="removed").inc()
        return removed

    def check_reorders(self) -> ReorderReport:
        """Reports ids whose stock is at or below their reorder level, in catalogue order."""
        with self._lock:
            product_ids = [p.id for p in self._repo.find_all() if p.needs_reorder]
        REORDER_FLAGGED.inc(len(product_ids))
        CATALOGUE_OPERATIONS.labels(operation="check_reorders", outcome="ok").inc()
        return ReorderReport(product_ids=product_ids)

    def batch_add_products(self, batch: Batch | Mapping[str, Any]) -> int:
        """
        Adds every in-stock product of the batch.

        The whole batch is rejected with BadBatchError, before anything is
        inserted, if any of its ids already exists in the catalogue. Products
        with no stock are skipped. Returns the number of products inserted.
        """
        if not isinstance(batch, Batch):
            batch = Batch.model_validate(batch)

        with self._lock:
            clashing_ids = [
                p.id for p in batch.products if self._repo.find_by_id(p.id) is not None
            ]
            if clashing_ids:
                logger.warning(
                    "Rejected batch for catalogue '%s': ids already present %s",
                    self.title,
                    clashing_ids,
                )
                CATALOGUE_OPERATIONS.labels(operation="batch_add", outcome="rejected").inc()
                raise BadBatchError(clashing_ids, message=self._settings.bad_batch_message)

            added = 0
            for product in batch.products:
                if product.quantity_in_stock <= 0:
                    continue
                if self.add_product(product):
                    added += 1
                else:
                    logger.warning(
                        "Duplicate id '%s' within batch for catalogue '%s' was not added",
                        product.id,
                        self.title,
                    )

        BATCH_PRODUCTS_ADDED.inc(added)
        CATALOGUE_OPERATIONS.labels(operation="batch_add", outcome="accepted").inc()
        return added

    def search(
        self, criteria: PriceAtMost | KeywordMatch | Mapping[str, Any]
    ) -> list[str] | list[Product]:
        """
        Price criteria return matching ids, keyword criteria return full products.
        A mapping whose first key is neither "price" nor "keyword" yields [].
        """
        parsed = self._parse_criteria(criteria)
        items: list[str] | list[Product]

        with self._lock:
            products = self._repo.find_all()

        if isinstance(parsed, PriceAtMost):
            items = [p.id for p in products if p.price is not None and p.price <= parsed.price]
        elif isinstance(parsed, KeywordMatch):
            needle = self._settings.search_keyword_override
            if needle is None:
                needle = str(parsed.keyword)
            items = [p for p in products if needle in p.name]
        else:
            items = []

        logger.info("Search on catalogue '%s' matched: %s", self.title, items)
        CATALOGUE_OPERATIONS.labels(
            operation="search", outcome=parsed.kind if parsed else "empty"
        ).inc()
        return items

    def _parse_criteria(self, criteria: Any) -> PriceAtMost | KeywordMatch | None:
        if isinstance(criteria, (PriceAtMost, KeywordMatch)):
            return criteria
        # Sequences carry no criteria keys and match nothing
        if isinstance(criteria, (list, tuple)):
            return None
        if not isinstance(criteria, Mapping):
            CATALOGUE_OPERATIONS.labels(operation="search", outcome="rejected").inc()
            raise BadSearchError(criteria, message=self._settings.bad_search_message)

        # Only the first key decides the criteria kind
        key = next(iter(criteria), None)
        if key not in ("price", "keyword"):
            return None
        try:
            return _CRITERIA_ADAPTER.validate_python({"kind": key, key: criteria[key]})
        except ValidationError:
            # An incomparable price bound matches no product
            logger.warning("Ignoring search criteria with invalid %s: %r", key, criteria[key])
            return None
