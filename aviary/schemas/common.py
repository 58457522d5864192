"""Building blocks shared by the bird, product, admin and contact schemas.

Every request/response model speaks camelCase on the wire and reads ORM rows
directly. Money and age amounts are finite and non-negative.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# Finite, non-negative amount (price in the shop currency, age in years)
Amount = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class CamelModel(BaseModel):
    """Base for catalog schemas: camelCase aliases, built from ORM attributes."""

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
    }


class HealthResponse(BaseModel):
    """Liveness payload for /health: service name and deployment environment."""
    status: str = "ok"
    app: str
    env: str
