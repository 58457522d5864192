"""Product Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import Field

from aviary.schemas.common import Amount, CamelModel

class ProductCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    price: Amount
    category: str | None = Field(default=None, max_length=100)
    description: str | None = None

class ProductUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    price: Amount | None = None
    category: str | None = Field(default=None, max_length=100)
    description: str | None = None

class ProductOut(CamelModel):
    id: str
    name: str
    price: float
    category: str | None = None
    description: str | None = None
    created_at: datetime
    updated_at: datetime
