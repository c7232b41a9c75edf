"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from stock.infrastructure.config import get_settings
from stock.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from stock.infrastructure.persistence.json_product_type_repository import (
    JsonProductTypeRepository,
)
from stock.infrastructure.persistence.json_provider_repository import (
    JsonProviderRepository,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().data_dir / "products.json")


def product_type_repository() -> JsonProductTypeRepository:
    return JsonProductTypeRepository(get_settings().data_dir / "product_types.json")


def provider_repository() -> JsonProviderRepository:
    return JsonProviderRepository(get_settings().data_dir / "providers.json")


def currency() -> str:
    return get_settings().currency
