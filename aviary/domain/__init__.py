"""Domain package — all ORM models are imported here so ``init_models`` registers them.

Folder intent:
  bird.py     — Birds (breed is the catalog category, images are upload URLs)
  product.py  — Products (optional category)
  admin.py    — Admin accounts (bcrypt password hashes)
  mixins.py   — Shared UUIDPrimaryKeyMixin, TimestampMixin
"""

from aviary.domain.admin import Admin
from aviary.domain.bird import Bird
from aviary.domain.product import Product

__all__ = [
    "Admin",
    "Bird",
    "Product",
]
