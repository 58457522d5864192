"""Standardized JSON response envelope helpers."""


from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from aviary.core.pagination import PageMeta
from aviary.services.catalog_query import PageResult

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Single-item response envelope: `{ data: {...} }`"""

    data: T

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


class ListResponse(BaseModel, Generic[T]):
    """Paginated list response envelope: `{ data: [...], meta: {...} }`"""

    data: list[T]
    meta: PageMeta

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


def paginated(result: PageResult, out_model: type[BaseModel]) -> dict:
    """Build a paginated response dict for use with ListResponse."""
    return {
        "data": [out_model.model_validate(item) for item in result.items],
        "meta": {
            "total": result.total_count,
            "page": result.page,
            "limit": result.page_size,
            "pages": result.page_count,
        },
    }
