"""Admin authentication.

Routes depend on the :class:`Authenticator` abstraction; the password-based
implementation checks bcrypt hashes stored on :class:`Admin` rows.

Rule: No FastAPI here. Session cookie handling stays in the router layer.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import bcrypt
from sqlalchemy.ext.asyncio import AsyncSession

from aviary.core.exceptions import UnauthorizedError, ValidationError
from aviary.repositories.admin import AdminRepository
from aviary.schemas.admin import AdminSession, LoginRequest

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10
# bcrypt only looks at the first 72 bytes of a password
_MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    raw = password.encode("utf-8")
    if len(raw) > _MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {_MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    raw = password.encode("utf-8")
    if len(raw) > _MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(raw, password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False


class Authenticator(ABC):
    @abstractmethod
    async def authenticate(self, credentials: LoginRequest) -> AdminSession:
        """Return the session for valid credentials or raise UnauthorizedError."""


class PasswordAuthenticator(Authenticator):
    def __init__(self, session: AsyncSession):
        self._repo = AdminRepository(session)

    async def authenticate(self, credentials: LoginRequest) -> AdminSession:
        admin = await self._repo.find_by_username(credentials.username)
        if admin is None or not verify_password(credentials.password, admin.password_hash):
            logger.info("Rejected login for username=%r", credentials.username)
            raise UnauthorizedError("Incorrect username or password")
        logger.info("Admin %s logged in", admin.username)
        return AdminSession(admin_id=admin.id, username=admin.username)
