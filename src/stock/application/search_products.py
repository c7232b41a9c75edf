"""Application service: Search Products use case (query)."""

from __future__ import annotations

from stock.application.dto import ProductDTO, to_dto
from stock.domain.repository.product_repository import ProductRepository
from stock.domain.service.product_filter import (
    ProductSearchCriteria,
    build_product_filter,
)


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, criteria: ProductSearchCriteria) -> list[ProductDTO]:
        """Return the products matching ``criteria``.

        With no name or brand given, every product matches.
        """
        predicate = build_product_filter(criteria)
        return [to_dto(p) for p in self._product_repo.search(predicate)]
