"""Provider entity: the supplier a product is bought from."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Provider:
    id: str
    name: str
    email: str = ""
    phone: str = ""
