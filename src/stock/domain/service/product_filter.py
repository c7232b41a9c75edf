"""Domain service: Product search filter.

Builds a single predicate over ``Product`` from optional search
criteria. Each supplied criterion becomes a case-insensitive substring
clause, and clauses are folded onto a base "the record exists" predicate
with one combinator (AND or OR) chosen for the whole request.

The result is a plain callable, so any repository can apply it
without knowing how it was assembled.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from stock.domain.model.product import Product

ProductPredicate = Callable[[Product], bool]


class Condition(str, Enum):
    AND = "AND"
    OR = "OR"


@dataclass(frozen=True)
class ProductSearchCriteria:
    """What the caller is looking for.

    Blank or whitespace-only strings count as "not supplied".
    """

    name: str | None = None
    brand: str | None = None
    condition: Condition = Condition.AND


def exists(product: Product) -> bool:
    """Base predicate: the product has a non-blank id."""
    return bool(product.id and product.id.strip())


def combine(
    first: ProductPredicate,
    second: ProductPredicate,
    condition: Condition,
) -> ProductPredicate:
    """Merge two predicates with the given combinator."""
    if condition is Condition.AND:
        return lambda product: first(product) and second(product)
    return lambda product: first(product) or second(product)


def contains_text(
    field: Callable[[Product], str],
    text: str,
) -> ProductPredicate:
    """Clause matching products whose ``field`` contains ``text``, ignoring case."""
    needle = text.upper()
    return lambda product: needle in (field(product) or "").upper()


def _is_supplied(text: str | None) -> bool:
    return text is not None and bool(text.strip())


def build_product_filter(criteria: ProductSearchCriteria) -> ProductPredicate:
    """Fold the supplied criteria, in declared order, onto ``exists``."""
    clauses: list[tuple[Callable[[Product], str], str | None]] = [
        (lambda product: product.name, criteria.name),
        (lambda product: product.brand, criteria.brand),
    ]

    predicate: ProductPredicate = exists
    for field, text in clauses:
        if not _is_supplied(text):
            continue
        predicate = combine(predicate, contains_text(field, text), criteria.condition)
    return predicate
