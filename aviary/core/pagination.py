"""Pagination helpers for list endpoints."""


import math
from collections.abc import Sequence
from typing import TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def page_count(total: int, page_size: int) -> int:
    """Number of pages needed for *total* items; 0 when there are none."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return math.ceil(total / page_size)


def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """Return the 1-based *page* of *items*, clipped to the sequence bounds.

    Pages past the last one are empty. ``page < 1`` and ``page_size < 1`` are
    caller errors and raise ``ValueError`` rather than being clamped.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    offset = (page - 1) * page_size
    return list(items[offset:offset + page_size])


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int
    pages: int

    model_config = {"populate_by_name": True}
