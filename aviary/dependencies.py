"""Shared FastAPI dependencies: admin session, authenticator, mailer, listing queries."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import List, Optional

from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from aviary.core.config import settings
from aviary.core.exceptions import UnauthorizedError
from aviary.db.base import get_db
from aviary.repositories.admin import AdminRepository
from aviary.schemas.admin import AdminSession
from aviary.services.auth import Authenticator, PasswordAuthenticator
from aviary.services.catalog_query import CatalogQueryPipeline, QuerySpec
from aviary.services.mailer import ContactMailer

logger = logging.getLogger(__name__)

SESSION_KEY = "admin"


def get_authenticator(session: AsyncSession = Depends(get_db)) -> Authenticator:
    return PasswordAuthenticator(session)


def get_mailer() -> ContactMailer:
    return ContactMailer.from_settings(settings)


async def get_current_admin(
    request: Request, session: AsyncSession = Depends(get_db)
) -> AdminSession:
    """
    Resolve the logged-in admin from the session cookie.

    Use as FastAPI dependency to protect routes:
        @router.post("")
        async def endpoint(admin: AdminSession = Depends(get_current_admin)):
            ...

    Raises:
        UnauthorizedError: 401 if there is no session or its admin was deleted
    """
    data = request.session.get(SESSION_KEY)
    if not data:
        raise UnauthorizedError()

    current = AdminSession.model_validate(data)
    admin = await AdminRepository(session).find_by_id(current.admin_id)
    if admin is None:
        logger.info("Dropping session of removed admin %s", current.admin_id)
        request.session.pop(SESSION_KEY, None)
        raise UnauthorizedError("Session is no longer valid")

    return AdminSession(admin_id=admin.id, username=admin.username)


def catalog_query(pipeline: CatalogQueryPipeline) -> Callable[..., QuerySpec]:
    """Build a dependency turning raw listing query params into a QuerySpec."""

    def dependency(
        categories: Optional[List[str]] = Query(
            default=None, description="Comma- or space-separated categories (match any)",
        ),
        price: Optional[str] = Query(
            default=None, description="Inclusive range 'min max'; '*' leaves a bound open",
        ),
        sortby: Optional[str] = Query(
            default=None, description="'field' or 'field asc|desc'",
        ),
        page: Optional[str] = Query(default=None, description="Page number (1-based)"),
    ) -> QuerySpec:
        return pipeline.parse(categories=categories, price=price, sortby=sortby, page=page)

    return dependency
