"""Application service: Add Product use case."""

from __future__ import annotations

import logging
import uuid

from stock.application.dto import ProductDTO, ProductSpec, to_dto
from stock.application.lookups import require_product_type, require_provider
from stock.domain.exceptions import DuplicateNameError, ValidationError
from stock.domain.model.product import Product
from stock.domain.model.value_objects import Money
from stock.domain.repository.product_repository import ProductRepository
from stock.domain.repository.product_type_repository import ProductTypeRepository
from stock.domain.repository.provider_repository import ProviderRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        product_type_repo: ProductTypeRepository,
        provider_repo: ProviderRepository,
        currency: str = "USD",
    ) -> None:
        self._product_repo = product_repo
        self._product_type_repo = product_type_repo
        self._provider_repo = provider_repo
        self._currency = currency

    def handle(self, spec: ProductSpec) -> ProductDTO:
        """Add a new product to the catalog.

        The product type and provider are resolved by ID before anything
        is persisted, so a product never points at a missing reference.
        """
        if not spec.name or not spec.name.strip():
            raise ValidationError("Product name is required")
        name = spec.name.strip()

        with self._product_repo.locked():
            if self._product_repo.get_by_name(name) is not None:
                raise DuplicateNameError(f"The name '{name}' is already in use")

            product = Product(
                id=str(uuid.uuid4()),
                name=name,
                public_price=Money.of(spec.public_price, self._currency),
                employee_price=Money.of(spec.employee_price, self._currency),
                stock=spec.stock,
                product_type=require_product_type(self._product_type_repo, spec.product_type_id),
                provider=require_provider(self._provider_repo, spec.provider_id),
            )
            self._product_repo.save(product)
        logger.info("Product %s '%s' created", product.id, product.name)
        return to_dto(product)
