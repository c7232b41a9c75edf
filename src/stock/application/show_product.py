"""Application service: Show Product use case (query)."""

from __future__ import annotations

from stock.application.dto import ProductDTO, to_dto
from stock.application.lookups import require_product
from stock.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        return to_dto(require_product(self._product_repo, product_id))
