"""Abstract repository for ProductType entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager, nullcontext

from stock.domain.model.product_type import ProductType


class ProductTypeRepository(ABC):

    def locked(self) -> AbstractContextManager:
        """Hold exclusive access to the store for a read-check-write sequence."""
        return nullcontext()

    @abstractmethod
    def get_by_id(self, type_id: str) -> ProductType | None:
        """Return a product type by its ID, or None."""

    @abstractmethod
    def list_all(self) -> list[ProductType]:
        """Return every product type."""

    @abstractmethod
    def save(self, product_type: ProductType) -> None:
        """Persist a new or updated product type."""
