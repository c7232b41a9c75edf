"""Application service: Add Product Type use case."""

from __future__ import annotations

import logging
import uuid

from stock.domain.exceptions import DuplicateNameError, ValidationError
from stock.domain.model.product_type import ProductType
from stock.domain.repository.product_type_repository import ProductTypeRepository

logger = logging.getLogger(__name__)


class AddProductTypeHandler:

    def __init__(self, product_type_repo: ProductTypeRepository) -> None:
        self._product_type_repo = product_type_repo

    def handle(self, initials: str, description: str) -> ProductType:
        if not description or not description.strip():
            raise ValidationError("Product type description is required")
        description = description.strip()

        with self._product_type_repo.locked():
            for existing in self._product_type_repo.list_all():
                if existing.description.lower() == description.lower():
                    raise DuplicateNameError(
                        f"Product type '{description}' already exists"
                    )

            product_type = ProductType(
                id=str(uuid.uuid4()),
                initials=(initials or "").strip().upper(),
                description=description,
            )
            self._product_type_repo.save(product_type)
        logger.info("Product type %s '%s' created", product_type.id, description)
        return product_type
