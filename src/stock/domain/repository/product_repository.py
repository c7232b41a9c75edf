"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager, nullcontext

from stock.domain.model.product import Product
from stock.domain.service.product_filter import ProductPredicate


class ProductRepository(ABC):

    def locked(self) -> AbstractContextManager:
        """Hold exclusive access to the store for a read-check-write sequence.

        Stores that are not shared between threads need no locking.
        """
        return nullcontext()

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def search(self, predicate: ProductPredicate) -> list[Product]:
        """Return the products for which ``predicate`` holds."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product. Unknown IDs are ignored."""
