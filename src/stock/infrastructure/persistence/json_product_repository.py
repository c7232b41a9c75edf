"""JSON-file-backed implementation of ProductRepository.

Each record embeds a snapshot of its product type and provider, so a
product can be read back without consulting the other files.
"""

from __future__ import annotations

import json
import threading
from decimal import Decimal
from pathlib import Path

from stock.domain.model.product import Product
from stock.domain.model.product_type import ProductType
from stock.domain.model.provider import Provider
from stock.domain.model.value_objects import Money
from stock.domain.repository.product_repository import ProductRepository
from stock.domain.service.product_filter import ProductPredicate
from stock.infrastructure.persistence.json_file import ensure_file, lock_for, write_atomic


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def locked(self) -> threading.RLock:
        return lock_for(self._file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def search(self, predicate: ProductPredicate) -> list[Product]:
        return [p for p in self._load().values() if predicate(p)]

    def save(self, product: Product) -> None:
        with self.locked():
            products = self._load()
            products[product.id] = product
            self._persist(products)

    def delete(self, product_id: str) -> None:
        with self.locked():
            products = self._load()
            if products.pop(product_id, None) is not None:
                self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "public_price": str(product.public_price.amount),
            "employee_price": str(product.employee_price.amount),
            "currency": product.public_price.currency,
            "stock": product.stock,
            "product_type": (
                {
                    "id": product.product_type.id,
                    "initials": product.product_type.initials,
                    "description": product.product_type.description,
                }
                if product.product_type else None
            ),
            "provider": (
                {
                    "id": product.provider.id,
                    "name": product.provider.name,
                    "email": product.provider.email,
                    "phone": product.provider.phone,
                }
                if product.provider else None
            ),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        currency = raw.get("currency", "USD")
        product_type = raw.get("product_type")
        provider = raw.get("provider")
        return Product(
            id=raw["id"],
            name=raw["name"],
            public_price=Money(Decimal(raw["public_price"]), currency),
            employee_price=Money(Decimal(raw["employee_price"]), currency),
            stock=raw.get("stock", 0),
            product_type=(
                ProductType(
                    id=product_type["id"],
                    initials=product_type.get("initials", ""),
                    description=product_type["description"],
                )
                if product_type else None
            ),
            provider=(
                Provider(
                    id=provider["id"],
                    name=provider["name"],
                    email=provider.get("email", ""),
                    phone=provider.get("phone", ""),
                )
                if provider else None
            ),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self._to_domain(item) for item in raw}

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        write_atomic(self._file_path, json.dumps(raw, indent=2) + "\n")

    def _ensure_file(self) -> None:
        ensure_file(self._file_path)
