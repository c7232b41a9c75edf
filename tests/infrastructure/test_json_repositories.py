"""Tests for the JSON-file repositories, against a temporary directory."""

import json
import threading
from decimal import Decimal

from stock.application.add_product_type import AddProductTypeHandler
from stock.application.adjust_stock import DecreaseStockHandler, IncreaseStockHandler
from stock.domain.exceptions import DuplicateNameError, ValidationError
from stock.domain.model.product_type import ProductType
from stock.domain.model.provider import Provider
from stock.domain.service.product_filter import ProductSearchCriteria, build_product_filter
from stock.infrastructure.persistence.json_product_repository import JsonProductRepository
from stock.infrastructure.persistence.json_product_type_repository import (
    JsonProductTypeRepository,
)
from stock.infrastructure.persistence.json_provider_repository import JsonProviderRepository
from tests.fakes import SNACKS, make_product


class TestJsonProductRepository:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "data" / "products.json"
        repo = JsonProductRepository(path)
        assert path.exists()
        assert repo.list_all() == []

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).save(make_product(id="1", public_price="2.50"))

        product = JsonProductRepository(path).get_by_id("1")
        assert product.name == "Coca-Cola"
        assert product.public_price.amount == Decimal("2.50")
        assert product.brand == "Soda"
        assert product.provider.name == "Acme Distribution"

    def test_prices_stored_as_strings(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).save(make_product(id="1", public_price="2.50"))
        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw[0]["public_price"] == "2.50"

    def test_product_without_references(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(make_product(id="1", product_type=None, provider=None))
        product = repo.get_by_id("1")
        assert product.product_type is None
        assert product.provider is None

    def test_save_replaces_existing(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(make_product(id="1", stock=1))
        repo.save(make_product(id="1", stock=9))
        assert len(repo.list_all()) == 1
        assert repo.get_by_id("1").stock == 9

    def test_get_by_name_ignores_case(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(make_product(id="1", name="Coca-Cola"))
        assert repo.get_by_name("COCA-COLA").id == "1"
        assert repo.get_by_name("Pepsi") is None

    def test_search(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(make_product(id="1", name="Coca-Cola"))
        repo.save(make_product(id="2", name="Chips", product_type=SNACKS))
        found = repo.search(build_product_filter(ProductSearchCriteria(brand="snack")))
        assert [p.id for p in found] == ["2"]

    def test_delete(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(make_product(id="1"))
        repo.delete("1")
        repo.delete("unknown")
        assert repo.list_all() == []


class TestJsonReferenceRepositories:

    def test_product_types(self, tmp_path):
        repo = JsonProductTypeRepository(tmp_path / "product_types.json")
        repo.save(ProductType(id="t1", initials="SD", description="Soda"))
        repo.save(ProductType(id="t1", initials="SD", description="Soft drinks"))
        assert [t.description for t in repo.list_all()] == ["Soft drinks"]
        assert repo.get_by_id("missing") is None

    def test_providers(self, tmp_path):
        path = tmp_path / "providers.json"
        JsonProviderRepository(path).save(Provider(id="p1", name="Acme", phone="555"))
        provider = JsonProviderRepository(path).get_by_id("p1")
        assert provider.name == "Acme"
        assert provider.phone == "555"


def _run_in_threads(count: int, target) -> list[BaseException]:
    """Start ``count`` threads on ``target`` together; return what they raised."""
    barrier = threading.Barrier(count)
    errors: list[BaseException] = []
    errors_guard = threading.Lock()

    def worker():
        barrier.wait()
        try:
            target()
        except BaseException as exc:
            with errors_guard:
                errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return errors


class TestConcurrentAccess:

    def test_repositories_on_same_file_share_a_lock(self, tmp_path):
        path = tmp_path / "products.json"
        assert JsonProductRepository(path).locked() is JsonProductRepository(path).locked()

    def test_concurrent_decrements_never_oversell(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).save(make_product(id="1", stock=5))

        errors = _run_in_threads(
            8, lambda: DecreaseStockHandler(JsonProductRepository(path)).handle("1", 5)
        )

        assert len(errors) == 7
        assert all(isinstance(e, ValidationError) for e in errors), errors
        assert JsonProductRepository(path).get_by_id("1").stock == 0

    def test_concurrent_increments_are_not_lost(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).save(make_product(id="1", stock=0))

        errors = _run_in_threads(
            10, lambda: IncreaseStockHandler(JsonProductRepository(path)).handle("1", 1)
        )

        assert errors == []
        assert JsonProductRepository(path).get_by_id("1").stock == 10

    def test_readers_never_see_a_partial_file(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).save(make_product(id="1", stock=0))

        def read_and_write():
            repo = JsonProductRepository(path)
            for _ in range(20):
                repo.list_all()
                IncreaseStockHandler(repo).handle("1", 1)

        assert _run_in_threads(6, read_and_write) == []
        assert JsonProductRepository(path).get_by_id("1").stock == 120

    def test_no_temporary_files_left_behind(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(make_product(id="1"))
        repo.delete("1")
        assert [p.name for p in tmp_path.iterdir()] == ["products.json"]

    def test_duplicate_type_registered_once(self, tmp_path):
        path = tmp_path / "product_types.json"

        errors = _run_in_threads(
            5,
            lambda: AddProductTypeHandler(JsonProductTypeRepository(path)).handle(
                initials="SD", description="Soda"
            ),
        )

        assert len(errors) == 4
        assert all(isinstance(e, DuplicateNameError) for e in errors), errors
        assert len(JsonProductTypeRepository(path).list_all()) == 1
