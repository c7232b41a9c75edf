"""JSON-file-backed implementation of ProviderRepository."""

from __future__ import annotations

import json
import threading
from pathlib import Path

from stock.domain.model.provider import Provider
from stock.domain.repository.provider_repository import ProviderRepository
from stock.infrastructure.persistence.json_file import ensure_file, lock_for, write_atomic


class JsonProviderRepository(ProviderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def locked(self) -> threading.RLock:
        return lock_for(self._file_path)

    # --- ProviderRepository interface -----------------------------------------

    def get_by_id(self, provider_id: str) -> Provider | None:
        for raw in self._load_raw():
            if raw["id"] == provider_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Provider]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, provider: Provider) -> None:
        with self.locked():
            records = self._load_raw()
            for i, raw in enumerate(records):
                if raw["id"] == provider.id:
                    records[i] = self._to_raw(provider)
                    break
            else:
                records.append(self._to_raw(provider))
            self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(provider: Provider) -> dict:
        return {
            "id": provider.id,
            "name": provider.name,
            "email": provider.email,
            "phone": provider.phone,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Provider:
        return Provider(
            id=raw["id"],
            name=raw["name"],
            email=raw.get("email", ""),
            phone=raw.get("phone", ""),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        write_atomic(self._file_path, json.dumps(records, indent=2) + "\n")

    def _ensure_file(self) -> None:
        ensure_file(self._file_path)
