"""Product aggregate.

A product is the unit the store sells. It carries two prices (one for
the public, one for employees), the quantity on hand, and references
to its type (the brand/category descriptor) and to the provider that
supplies it.
"""

from __future__ import annotations

from dataclasses import dataclass

from stock.domain.exceptions import ValidationError
from stock.domain.model.product_type import ProductType
from stock.domain.model.provider import Provider
from stock.domain.model.value_objects import Money, Quantity


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root. Kept as a mutable dataclass because
    stock movements and price changes are legitimate mutations.

    Invariants:
    - ``stock`` is never negative
    - ``name`` is never blank
    """

    id: str
    name: str
    public_price: Money
    employee_price: Money
    stock: int = 0
    product_type: ProductType | None = None
    provider: Provider | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.stock < 0:
            raise ValidationError("Product stock cannot be negative")

    @property
    def brand(self) -> str:
        """Description of the product type, or an empty string."""
        if self.product_type is None:
            return ""
        return self.product_type.description

    def rename(self, new_name: str) -> None:
        if not new_name or not new_name.strip():
            raise ValidationError("Product name is required")
        self.name = new_name.strip()

    def update_prices(
        self,
        public_price: Money | None = None,
        employee_price: Money | None = None,
    ) -> None:
        """Change either price; a price left as None keeps its value."""
        if public_price is not None:
            self.public_price = public_price
        if employee_price is not None:
            self.employee_price = employee_price

    def increase_stock(self, quantity: Quantity) -> None:
        self.stock += quantity.value

    def decrease_stock(self, quantity: Quantity) -> None:
        """Take units out of stock.

        Raises ValidationError if fewer units are on hand than requested.
        """
        if quantity.value > self.stock:
            raise ValidationError(
                f"Insufficient stock for {self.name} "
                f"(need {quantity.value}, have {self.stock})"
            )
        self.stock -= quantity.value
