"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from stock.application.lookups import require_product
from stock.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        """Remove a product from the catalog.

        Raises EntityNotFoundError if there is nothing to delete.
        """
        with self._product_repo.locked():
            product = require_product(self._product_repo, product_id)
            self._product_repo.delete(product.id)
        logger.info("Product %s '%s' deleted", product.id, product.name)
