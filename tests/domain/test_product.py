"""Unit tests for the Product aggregate."""

from decimal import Decimal

import pytest

from stock.domain.exceptions import ValidationError
from stock.domain.model.value_objects import Money, Quantity
from tests.fakes import make_product


class TestProductCreation:

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            make_product(name="   ")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            make_product(stock=-1)

    def test_brand_is_type_description(self):
        assert make_product().brand == "Soda"

    def test_brand_empty_without_type(self):
        assert make_product(product_type=None).brand == ""


class TestProductStock:

    def test_increase(self):
        p = make_product(stock=10)
        p.increase_stock(Quantity(5))
        assert p.stock == 15

    def test_decrease(self):
        p = make_product(stock=10)
        p.decrease_stock(Quantity(4))
        assert p.stock == 6

    def test_decrease_to_zero(self):
        p = make_product(stock=3)
        p.decrease_stock(Quantity(3))
        assert p.stock == 0

    def test_decrease_below_zero_rejected(self):
        p = make_product(stock=3)
        with pytest.raises(ValidationError, match="Insufficient stock"):
            p.decrease_stock(Quantity(4))
        assert p.stock == 3


class TestProductChanges:

    def test_rename_strips(self):
        p = make_product()
        p.rename("  Pepsi ")
        assert p.name == "Pepsi"

    def test_rename_blank_rejected(self):
        p = make_product()
        with pytest.raises(ValidationError):
            p.rename("")

    def test_update_only_public_price(self):
        p = make_product(public_price="2.50", employee_price="2.00")
        p.update_prices(public_price=Money.of("3.00"))
        assert p.public_price.amount == Decimal("3.00")
        assert p.employee_price.amount == Decimal("2.00")
