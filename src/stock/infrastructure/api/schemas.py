"""
Pydantic models for the product API requests and responses.
"""

from decimal import Decimal
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from stock.application.dto import ProductChanges, ProductDTO, ProductSpec
from stock.domain.service.product_filter import Condition, ProductSearchCriteria

T = TypeVar("T")


class ProductIn(BaseModel):
    """Request body for creating a product."""
    name: str = Field(min_length=1, description="Product name, unique in the catalog")
    public_price: Decimal = Field(ge=0, description="Sale price for the public")
    employee_price: Decimal = Field(ge=0, description="Sale price for employees")
    stock: int = Field(default=0, ge=0, description="Units on hand")
    product_type_id: str = Field(description="ID of the product type (brand)")
    provider_id: str = Field(description="ID of the provider")

    def to_spec(self) -> ProductSpec:
        return ProductSpec(
            name=self.name,
            public_price=self.public_price,
            employee_price=self.employee_price,
            product_type_id=self.product_type_id,
            provider_id=self.provider_id,
            stock=self.stock,
        )


class ProductUpdate(BaseModel):
    """Request body for updating a product. Omitted fields are left unchanged."""
    name: Optional[str] = Field(default=None, min_length=1)
    public_price: Optional[Decimal] = Field(default=None, ge=0)
    employee_price: Optional[Decimal] = Field(default=None, ge=0)
    stock: Optional[int] = Field(default=None, ge=0)
    product_type_id: Optional[str] = None
    provider_id: Optional[str] = None

    def to_changes(self) -> ProductChanges:
        return ProductChanges(
            name=self.name,
            public_price=self.public_price,
            employee_price=self.employee_price,
            stock=self.stock,
            product_type_id=self.product_type_id,
            provider_id=self.provider_id,
        )


class ProductSearchIn(BaseModel):
    """Request body for the search endpoint."""
    name: Optional[str] = Field(default=None, description="Substring of the product name")
    brand: Optional[str] = Field(default=None, description="Substring of the product type description")
    condition: Condition = Field(default=Condition.AND, description="How the criteria are combined: AND or OR")

    def to_criteria(self) -> ProductSearchCriteria:
        return ProductSearchCriteria(name=self.name, brand=self.brand, condition=self.condition)


class ProductOut(BaseModel):
    """A product as returned by the API."""
    id: str
    name: str
    public_price: Decimal
    employee_price: Decimal
    currency: str
    stock: int
    product_type_id: Optional[str] = None
    brand: str = ""
    provider_id: Optional[str] = None
    provider_name: Optional[str] = None

    @classmethod
    def from_dto(cls, dto: ProductDTO) -> "ProductOut":
        return cls(
            id=dto.id,
            name=dto.name,
            public_price=dto.public_price,
            employee_price=dto.employee_price,
            currency=dto.currency,
            stock=dto.stock,
            product_type_id=dto.product_type_id,
            brand=dto.brand,
            provider_id=dto.provider_id,
            provider_name=dto.provider_name,
        )


class Envelope(BaseModel):
    """Status envelope returned by create, update and delete."""
    success: bool
    message: str = ""
    data: Any = None


class GenericResult(BaseModel, Generic[T]):
    """Wrapper for single scalar answers (stock level, prices)."""
    result: T

