"""Bird Pydantic schemas (request DTOs and response models)."""


from datetime import datetime
from typing import Literal

from pydantic import Field

from aviary.schemas.common import Amount, CamelModel

Gender = Literal["male", "female", "unknown"]

class BirdCreate(CamelModel):
    breed: str = Field(min_length=1, max_length=255)
    price: Amount
    age: Amount | None = None
    gender: Gender | None = None
    description: str | None = None

class BirdUpdate(CamelModel):
    breed: str | None = Field(default=None, min_length=1, max_length=255)
    price: Amount | None = None
    age: Amount | None = None
    gender: Gender | None = None
    description: str | None = None

class BirdOut(CamelModel):
    id: str
    breed: str
    price: float
    age: float | None = None
    gender: str | None = None
    description: str | None = None
    images: list[str] = []
    created_at: datetime
    updated_at: datetime
