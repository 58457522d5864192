"""Catalog record filters.

Both filters take the list fetched from the store and return a new list of
the same record references; records themselves are never modified. An absent
or empty criterion leaves the input untouched.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence
from typing import Any, Optional, Tuple

PriceRange = Tuple[Optional[float], Optional[float]]


def filter_by_category(
    records: Sequence[Any],
    categories: Optional[Collection[str]],
    field: str = "category",
) -> list[Any]:
    """Keep records whose *field* exactly equals one of *categories*.

    Matching is case-sensitive. Records without the attribute (or with
    ``None``) never match a non-empty request.
    """
    if not categories:
        return list(records)
    wanted = set(categories)
    return [r for r in records if getattr(r, field, None) in wanted]


def filter_by_price(
    records: Sequence[Any],
    price_range: Optional[PriceRange],
) -> list[Any]:
    """Keep records with ``low <= price <= high``; a ``None`` bound is open."""
    if price_range is None:
        return list(records)
    low, high = price_range
    return [
        r for r in records
        if (low is None or r.price >= low) and (high is None or r.price <= high)
    ]
