"""SQLAlchemy ORM model for admin accounts."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from aviary.db.base import Base
from aviary.domain.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Admin(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "admins"

    # Unique among live (not soft-deleted) admins; enforced by AdminService
    username: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    # bcrypt hash, never the plain password
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    added_by: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    updated_by: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
