from sqlalchemy import func, select

from aviary.domain.admin import Admin
from aviary.repositories.base import BaseRepository


class AdminRepository(BaseRepository[Admin]):
    model = Admin
    default_order = "username"

    async def find_by_username(self, username: str) -> Admin | None:
        result = await self._session.execute(
            self._base_query().where(Admin.username == username)
        )
        return result.scalars().first()

    async def count(self) -> int:
        q = select(func.count()).select_from(self._base_query().subquery())
        return (await self._session.execute(q)).scalar_one()
