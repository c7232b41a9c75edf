"""Application service: Add Provider use case."""

from __future__ import annotations

import logging
import uuid

from stock.domain.exceptions import DuplicateNameError, ValidationError
from stock.domain.model.provider import Provider
from stock.domain.repository.provider_repository import ProviderRepository

logger = logging.getLogger(__name__)


class AddProviderHandler:

    def __init__(self, provider_repo: ProviderRepository) -> None:
        self._provider_repo = provider_repo

    def handle(self, name: str, email: str = "", phone: str = "") -> Provider:
        if not name or not name.strip():
            raise ValidationError("Provider name is required")
        name = name.strip()

        with self._provider_repo.locked():
            for existing in self._provider_repo.list_all():
                if existing.name.lower() == name.lower():
                    raise DuplicateNameError(f"Provider '{name}' already exists")

            provider = Provider(id=str(uuid.uuid4()), name=name, email=email, phone=phone)
            self._provider_repo.save(provider)
        logger.info("Provider %s '%s' created", provider.id, name)
        return provider
