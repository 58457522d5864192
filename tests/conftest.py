"""
Pytest configuration and shared fixtures
"""

import os
import tempfile
from pathlib import Path

# Configure the app before anything imports aviary.core.config
_TMP = Path(tempfile.mkdtemp(prefix="aviary-tests-"))
os.environ["APP_ENV"] = "test"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["UPLOAD_DIR"] = str(_TMP / "uploads")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP / 'unused.db'}"
for _var in ("EMAIL_ADDRESS", "EMAIL_PASSWORD", "BOOTSTRAP_ADMIN_USERNAME", "BOOTSTRAP_ADMIN_PASSWORD"):
    os.environ.pop(_var, None)

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from aviary.db.base import get_db, init_models
from aviary.main import app
from aviary.schemas.admin import AdminRegister
from aviary.services.admin import AdminService

ADMIN_USERNAME = "jamie"
ADMIN_PASSWORD = "hunter22"


@pytest.fixture
async def engine(tmp_path_factory):
    """Fresh SQLite database per test."""
    db_dir = tmp_path_factory.mktemp("db")
    eng = create_async_engine(f"sqlite+aiosqlite:///{db_dir / 'test.db'}")
    await init_models(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def admin(session_factory):
    """A registered admin account, committed to the test database."""
    async with session_factory() as session:
        created = await AdminService(session).register_admin(
            AdminRegister(
                username=ADMIN_USERNAME,
                password=ADMIN_PASSWORD,
                confirm_password=ADMIN_PASSWORD,
            ),
            added_by=None,
        )
        await session.commit()
    return created


@pytest.fixture
async def client(session_factory):
    """HTTP client against the app with get_db pointed at the test database."""

    async def _get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def admin_client(client, admin):
    """Client holding a logged-in admin session cookie."""
    resp = await client.post(
        "/api/admins/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert resp.status_code == 200, resp.text
    return client
