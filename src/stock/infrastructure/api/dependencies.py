"""FastAPI dependencies that hand the routes their repositories.

Tests swap these out through ``app.dependency_overrides``.
"""

from stock.domain.repository.product_repository import ProductRepository
from stock.domain.repository.product_type_repository import ProductTypeRepository
from stock.domain.repository.provider_repository import ProviderRepository
from stock.infrastructure import bootstrap


def get_product_repository() -> ProductRepository:
    return bootstrap.product_repository()


def get_product_type_repository() -> ProductTypeRepository:
    return bootstrap.product_type_repository()


def get_provider_repository() -> ProviderRepository:
    return bootstrap.provider_repository()


def get_currency() -> str:
    return bootstrap.currency()
