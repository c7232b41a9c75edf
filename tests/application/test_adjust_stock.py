"""Integration tests for stock queries and movements."""

import pytest

from stock.application.adjust_stock import (
    DecreaseStockHandler,
    IncreaseStockHandler,
    ShowStockHandler,
)
from stock.domain.exceptions import EntityNotFoundError, ValidationError
from tests.fakes import FakeProductRepository, make_product


def _repo(stock: int = 10) -> FakeProductRepository:
    return FakeProductRepository([make_product(id="1", stock=stock)])


class TestShowStock:

    def test_returns_level(self):
        assert ShowStockHandler(_repo(7)).handle("1") == 7

    def test_missing_product(self):
        with pytest.raises(EntityNotFoundError):
            ShowStockHandler(_repo()).handle("2")


class TestIncreaseStock:

    def test_adds_and_persists(self):
        repo = _repo(10)
        assert IncreaseStockHandler(repo).handle("1", 5) == 15
        assert repo.get_by_id("1").stock == 15

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_non_positive_rejected(self, quantity):
        with pytest.raises(ValidationError, match="must be positive"):
            IncreaseStockHandler(_repo()).handle("1", quantity)


class TestDecreaseStock:

    def test_subtracts_and_persists(self):
        repo = _repo(10)
        assert DecreaseStockHandler(repo).handle("1", 4) == 6
        assert repo.get_by_id("1").stock == 6

    def test_insufficient_stock_rejected(self):
        repo = _repo(2)
        with pytest.raises(ValidationError, match="Insufficient stock"):
            DecreaseStockHandler(repo).handle("1", 3)
        assert repo.get_by_id("1").stock == 2

    def test_missing_product(self):
        with pytest.raises(EntityNotFoundError):
            DecreaseStockHandler(_repo()).handle("2", 1)
