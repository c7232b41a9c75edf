"""JSON-file-backed implementation of ProductTypeRepository."""

from __future__ import annotations

import json
import threading
from pathlib import Path

from stock.domain.model.product_type import ProductType
from stock.domain.repository.product_type_repository import ProductTypeRepository
from stock.infrastructure.persistence.json_file import ensure_file, lock_for, write_atomic


class JsonProductTypeRepository(ProductTypeRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def locked(self) -> threading.RLock:
        return lock_for(self._file_path)

    # --- ProductTypeRepository interface --------------------------------------

    def get_by_id(self, type_id: str) -> ProductType | None:
        for raw in self._load_raw():
            if raw["id"] == type_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[ProductType]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, product_type: ProductType) -> None:
        with self.locked():
            records = self._load_raw()
            for i, raw in enumerate(records):
                if raw["id"] == product_type.id:
                    records[i] = self._to_raw(product_type)
                    break
            else:
                records.append(self._to_raw(product_type))
            self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product_type: ProductType) -> dict:
        return {
            "id": product_type.id,
            "initials": product_type.initials,
            "description": product_type.description,
        }

    @staticmethod
    def _to_domain(raw: dict) -> ProductType:
        return ProductType(
            id=raw["id"],
            initials=raw.get("initials", ""),
            description=raw["description"],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        write_atomic(self._file_path, json.dumps(records, indent=2) + "\n")

    def _ensure_file(self) -> None:
        ensure_file(self._file_path)
