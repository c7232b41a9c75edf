"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from stock.application.dto import ProductChanges, ProductDTO, to_dto
from stock.application.lookups import (
    require_product,
    require_product_type,
    require_provider,
)
from stock.domain.exceptions import DuplicateNameError, ValidationError
from stock.domain.model.product import Product
from stock.domain.model.value_objects import Money
from stock.domain.repository.product_repository import ProductRepository
from stock.domain.repository.product_type_repository import ProductTypeRepository
from stock.domain.repository.provider_repository import ProviderRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        product_type_repo: ProductTypeRepository,
        provider_repo: ProviderRepository,
    ) -> None:
        self._product_repo = product_repo
        self._product_type_repo = product_type_repo
        self._provider_repo = provider_repo

    def handle(self, product_id: str, changes: ProductChanges) -> ProductDTO:
        """Merge ``changes`` into an existing product.

        Only the fields that are set are applied. Every change is checked
        before the product is touched, so a rejected update leaves the
        stored product as it was.
        """
        with self._product_repo.locked():
            product = self._merge(product_id, changes)
        logger.info("Product %s updated", product.id)
        return to_dto(product)

    def _merge(self, product_id: str, changes: ProductChanges) -> Product:
        product = require_product(self._product_repo, product_id)
        currency = product.public_price.currency

        name = None
        if changes.name is not None:
            name = changes.name.strip()
            if not name:
                raise ValidationError("Product name is required")
            other = self._product_repo.get_by_name(name)
            if other is not None and other.id != product.id:
                raise DuplicateNameError(f"The name '{name}' is already in use")

        if changes.stock is not None and changes.stock < 0:
            raise ValidationError("Product stock cannot be negative")

        public_price = (
            Money.of(changes.public_price, currency)
            if changes.public_price is not None else None
        )
        employee_price = (
            Money.of(changes.employee_price, currency)
            if changes.employee_price is not None else None
        )
        product_type = (
            require_product_type(self._product_type_repo, changes.product_type_id)
            if changes.product_type_id is not None else None
        )
        provider = (
            require_provider(self._provider_repo, changes.provider_id)
            if changes.provider_id is not None else None
        )

        if name is not None:
            product.rename(name)
        product.update_prices(public_price, employee_price)
        if changes.stock is not None:
            product.stock = changes.stock
        if product_type is not None:
            product.product_type = product_type
        if provider is not None:
            product.provider = provider

        self._product_repo.save(product)
        return product
