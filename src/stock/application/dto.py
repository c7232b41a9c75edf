"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the API/CLI and application layers without
exposing domain internals to the outside world. Conversions are written
out field by field.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from stock.domain.model.product import Product


@dataclass(frozen=True)
class ProductSpec:
    """Input: everything needed to register a new product."""

    name: str
    public_price: str | Decimal
    employee_price: str | Decimal
    product_type_id: str
    provider_id: str
    stock: int = 0


@dataclass(frozen=True)
class ProductChanges:
    """Input: a partial update. Fields left as None keep their value."""

    name: str | None = None
    public_price: str | Decimal | None = None
    employee_price: str | Decimal | None = None
    stock: int | None = None
    product_type_id: str | None = None
    provider_id: str | None = None


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as shown to API clients and CLI users."""

    id: str
    name: str
    public_price: Decimal
    employee_price: Decimal
    currency: str
    stock: int
    product_type_id: str | None
    brand: str
    provider_id: str | None
    provider_name: str | None


def to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        public_price=product.public_price.amount,
        employee_price=product.employee_price.amount,
        currency=product.public_price.currency,
        stock=product.stock,
        product_type_id=product.product_type.id if product.product_type else None,
        brand=product.brand,
        provider_id=product.provider.id if product.provider else None,
        provider_name=product.provider.name if product.provider else None,
    )
