"""ProductType entity: the brand/category descriptor of a product."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ProductType:
    id: str
    initials: str
    description: str
