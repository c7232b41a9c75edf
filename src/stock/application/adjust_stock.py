"""Application services: stock level query and stock movements."""

from __future__ import annotations

import logging

from stock.application.lookups import require_product
from stock.domain.model.value_objects import Quantity
from stock.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ShowStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> int:
        return require_product(self._product_repo, product_id).stock


class IncreaseStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, quantity: int) -> int:
        """Add ``quantity`` units to a product's stock and return the new level."""
        with self._product_repo.locked():
            product = require_product(self._product_repo, product_id)
            product.increase_stock(Quantity(quantity))
            self._product_repo.save(product)
        logger.info("Stock of %s increased by %d to %d", product.id, quantity, product.stock)
        return product.stock


class DecreaseStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, quantity: int) -> int:
        """Take ``quantity`` units out of a product's stock and return the new level.

        Raises ValidationError if the product does not have enough stock.
        """
        with self._product_repo.locked():
            product = require_product(self._product_repo, product_id)
            product.decrease_stock(Quantity(quantity))
            self._product_repo.save(product)
        logger.info("Stock of %s decreased by %d to %d", product.id, quantity, product.stock)
        return product.stock
