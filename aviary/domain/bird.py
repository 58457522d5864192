"""SQLAlchemy ORM model for Birds listed in the catalog.

``breed`` doubles as the bird's catalog category. ``images`` holds the public
URLs of uploaded pictures, in upload order.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import JSON, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from aviary.db.base import Base
from aviary.domain.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Bird(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "birds"

    breed: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    age: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    # "male" | "female" | "unknown"
    gender: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    images: Mapped[List[str]] = mapped_column(JSON, default=list, nullable=False)
