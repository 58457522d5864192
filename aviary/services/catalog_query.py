"""Catalog listing pipeline: filter, sort and paginate an in-memory record list.

A ``QuerySpec`` is built per request from the raw query-string values and
validated up front; malformed input raises :class:`ValidationError` and never
reaches the pipeline. ``CatalogQueryPipeline.run`` then applies, in order:

  category filter -> price filter -> sort -> count -> paginate

Counting happens after filtering so ``total_count``/``page_count`` describe
the filtered set, and sorting happens before slicing so page boundaries fall
on globally sorted positions.

Rule: No FastAPI / no SQLAlchemy here. The pipeline holds no state between
calls and only reorders references to the records it is given.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field

from aviary.core.exceptions import ValidationError
from aviary.core.pagination import page_count, paginate
from aviary.services.filters import filter_by_category, filter_by_price
from aviary.services.sorting import sort_records

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10

_ASCENDING = {"asc", "ascending"}
_DESCENDING = {"desc", "descending"}
_OPEN_BOUND = "*"
_DELIMITERS = re.compile(r"[,\s]+")


class QuerySpec(BaseModel):
    """Parsed, validated listing parameters for one request."""

    categories: Optional[frozenset[str]] = None
    price_range: Optional[Tuple[Optional[float], Optional[float]]] = None
    sort_key: Optional[str] = None
    descending: bool = False
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    model_config = {"frozen": True}


class PageResult(BaseModel):
    """One page of records plus counts describing the filtered set."""

    items: list[Any]
    total_count: int
    page_count: int
    page: int
    page_size: int

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# Raw query-string parsing
# ---------------------------------------------------------------------------

def parse_categories(raw: str | Iterable[str] | None) -> Optional[frozenset[str]]:
    """Split comma- or whitespace-delimited category values into a set.

    Accepts a single string or the values of a repeated query parameter.
    Returns ``None`` when nothing usable was supplied.
    """
    if raw is None:
        return None
    values = [raw] if isinstance(raw, str) else list(raw)
    tokens = {tok for value in values for tok in _DELIMITERS.split(value) if tok}
    return frozenset(tokens) or None


def _parse_bound(token: str) -> Optional[float]:
    if token == _OPEN_BOUND:
        return None
    try:
        value = float(token)
    except ValueError:
        raise ValidationError(f"Price bound '{token}' is not a number") from None
    if not math.isfinite(value):
        raise ValidationError(f"Price bound '{token}' must be a finite number")
    return value


def parse_price_range(raw: str | None) -> Optional[Tuple[Optional[float], Optional[float]]]:
    """Parse ``"min max"`` into an inclusive range.

    ``*`` marks an open bound and a single token sets only the minimum.
    """
    if raw is None or not raw.strip():
        return None
    tokens = raw.split()
    if len(tokens) > 2:
        raise ValidationError("Price range takes at most two values: 'min max'")
    low = _parse_bound(tokens[0])
    high = _parse_bound(tokens[1]) if len(tokens) == 2 else None
    if low is not None and high is not None and low > high:
        raise ValidationError(f"Price range minimum {low:g} exceeds maximum {high:g}")
    if low is None and high is None:
        return None
    return (low, high)


def parse_sort(raw: str | None, allowed: Iterable[str]) -> Tuple[Optional[str], bool]:
    """Parse ``"field [asc|desc]"`` into ``(field, descending)``."""
    if raw is None or not raw.strip():
        return None, False
    tokens = raw.split()
    if len(tokens) > 2:
        raise ValidationError("Sort takes a field and an optional direction")
    field = tokens[0]
    allowed = set(allowed)
    if field not in allowed:
        accepted = ", ".join(sorted(allowed))
        raise ValidationError(f"Cannot sort by '{field}'. Accepted fields: {accepted}")
    if len(tokens) == 1:
        return field, False
    direction = tokens[1].lower()
    if direction in _ASCENDING:
        return field, False
    if direction in _DESCENDING:
        return field, True
    raise ValidationError(f"Unknown sort direction '{tokens[1]}'. Use 'asc' or 'desc'")


def parse_page(raw: str | None) -> int:
    if raw is None or not raw.strip():
        return 1
    text = raw.strip()
    if not text.isdecimal() or int(text) < 1:
        raise ValidationError(f"Page must be a positive integer, got '{raw}'")
    return int(text)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

class CatalogQueryPipeline:
    """Filter/sort/paginate over records of one entity type.

    *category_field* names the attribute the category filter compares
    against (``breed`` for birds). *sort_fields* maps the public sort key
    accepted in ``sortby`` to the record attribute it orders by.
    """

    def __init__(
        self,
        category_field: str,
        sort_fields: Mapping[str, str],
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.category_field = category_field
        self.sort_fields = dict(sort_fields)
        self.page_size = page_size

    def parse(
        self,
        *,
        categories: str | Iterable[str] | None = None,
        price: str | None = None,
        sortby: str | None = None,
        page: str | None = None,
    ) -> QuerySpec:
        """Build a :class:`QuerySpec` from raw query-string values."""
        sort_key, descending = parse_sort(sortby, self.sort_fields)
        return QuerySpec(
            categories=parse_categories(categories),
            price_range=parse_price_range(price),
            sort_key=sort_key,
            descending=descending,
            page=parse_page(page),
            page_size=self.page_size,
        )

    def run(self, records: Sequence[Any], query: QuerySpec) -> PageResult:
        if query.sort_key is not None and query.sort_key not in self.sort_fields:
            raise ValueError(f"Unsupported sort key '{query.sort_key}'")

        matched = filter_by_category(records, query.categories, field=self.category_field)
        matched = filter_by_price(matched, query.price_range)
        matched = sort_records(
            matched,
            self.sort_fields.get(query.sort_key) if query.sort_key else None,
            descending=query.descending,
        )

        total = len(matched)
        pages = page_count(total, query.page_size)
        items = paginate(matched, query.page, query.page_size)

        logger.debug(
            "Catalog query %s matched %d/%d records, page %d/%d",
            query.model_dump(exclude={"page_size"}), total, len(records), query.page, pages,
        )
        return PageResult(
            items=items,
            total_count=total,
            page_count=pages,
            page=query.page,
            page_size=query.page_size,
        )
