"""Stable ordering of catalog records by a single attribute."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional


def _sort_key(attribute: str):
    def key(record: Any) -> tuple:
        value = getattr(record, attribute, None)
        # Missing values group after present ones; the flag keeps None from
        # ever being compared against a real value.
        return (value is None, value if value is not None else 0)
    return key


def sort_records(
    records: Sequence[Any],
    attribute: Optional[str],
    descending: bool = False,
) -> list[Any]:
    """Return *records* ordered by *attribute*.

    Python's sort is stable, so records with equal keys keep their input
    order in both directions. With no attribute the input order is kept.
    """
    if not attribute:
        return list(records)
    return sorted(records, key=_sort_key(attribute), reverse=descending)
