"""Admin account service."""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from aviary.core.exceptions import ConflictError, NotFoundError
from aviary.domain.admin import Admin
from aviary.repositories.admin import AdminRepository
from aviary.schemas.admin import AdminRegister, AdminUpdate
from aviary.services.auth import hash_password

logger = logging.getLogger(__name__)

class AdminService:
    def __init__(self, session: AsyncSession):
        self._repo = AdminRepository(session)

    async def list_admins(self) -> list[Admin]:
        return await self._repo.find_all()

    async def get_admin(self, admin_id: str) -> Admin:
        admin = await self._repo.find_by_id(admin_id)
        if not admin:
            raise NotFoundError("Admin", admin_id)
        return admin

    async def _ensure_username_free(self, username: str, current_id: str | None = None) -> None:
        existing = await self._repo.find_by_username(username)
        if existing and existing.id != current_id:
            raise ConflictError(f"Username '{username}' is already taken")

    async def register_admin(self, data: AdminRegister, added_by: str | None) -> Admin:
        await self._ensure_username_free(data.username)
        admin = Admin(
            username=data.username,
            password_hash=hash_password(data.password),
            added_by=added_by,
        )
        admin = await self._repo.save(admin)
        logger.info("Admin %s registered by %s", admin.username, added_by)
        return admin

    async def update_admin(self, admin_id: str, data: AdminUpdate, updated_by: str) -> Admin:
        admin = await self.get_admin(admin_id)
        await self._ensure_username_free(data.username, current_id=admin_id)
        admin.username = data.username
        admin.password_hash = hash_password(data.password)
        admin.updated_by = updated_by
        return await self._repo.save(admin)

    async def delete_admin(self, admin_id: str) -> None:
        deleted = await self._repo.delete(admin_id)
        if not deleted:
            raise NotFoundError("Admin", admin_id)
        logger.info("Admin %s deleted", admin_id)

    async def ensure_bootstrap_admin(self, username: str, password: str) -> Admin | None:
        """Create the first admin account when none exists yet."""
        if await self._repo.count() > 0:
            return None
        admin = await self._repo.save(
            Admin(username=username, password_hash=hash_password(password), added_by="bootstrap")
        )
        logger.warning("Created bootstrap admin %r; change its password", username)
        return admin
