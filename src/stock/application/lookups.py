"""Shared lookups that turn an unknown ID into EntityNotFoundError."""

from __future__ import annotations

from stock.domain.exceptions import EntityNotFoundError
from stock.domain.model.product import Product
from stock.domain.model.product_type import ProductType
from stock.domain.model.provider import Provider
from stock.domain.repository.product_repository import ProductRepository
from stock.domain.repository.product_type_repository import ProductTypeRepository
from stock.domain.repository.provider_repository import ProviderRepository


def require_product(repo: ProductRepository, product_id: str) -> Product:
    product = repo.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
    return product


def require_product_type(repo: ProductTypeRepository, type_id: str) -> ProductType:
    product_type = repo.get_by_id(type_id)
    if product_type is None:
        raise EntityNotFoundError(f"Product type with ID '{type_id}' not found")
    return product_type


def require_provider(repo: ProviderRepository, provider_id: str) -> Provider:
    provider = repo.get_by_id(provider_id)
    if provider is None:
        raise EntityNotFoundError(f"Provider with ID '{provider_id}' not found")
    return provider
