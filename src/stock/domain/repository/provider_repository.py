"""Abstract repository for Provider entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager, nullcontext

from stock.domain.model.provider import Provider


class ProviderRepository(ABC):

    def locked(self) -> AbstractContextManager:
        """Hold exclusive access to the store for a read-check-write sequence."""
        return nullcontext()

    @abstractmethod
    def get_by_id(self, provider_id: str) -> Provider | None:
        """Return a provider by its ID, or None."""

    @abstractmethod
    def list_all(self) -> list[Provider]:
        """Return every provider."""

    @abstractmethod
    def save(self, provider: Provider) -> None:
        """Persist a new or updated provider."""
