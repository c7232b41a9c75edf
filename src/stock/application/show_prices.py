"""Application services: price queries."""

from __future__ import annotations

from decimal import Decimal

from stock.application.lookups import require_product
from stock.domain.repository.product_repository import ProductRepository


class ShowPublicPriceHandler:
    """Price charged to the general public."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Decimal:
        return require_product(self._product_repo, product_id).public_price.amount


class ShowEmployeePriceHandler:
    """Price charged to employees."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Decimal:
        return require_product(self._product_repo, product_id).employee_price.amount
