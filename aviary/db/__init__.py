"""Database package — async SQLAlchemy engine, session factory, Base."""
from aviary.db.base import Base, async_session_factory, engine, get_db, init_models

__all__ = ["Base", "async_session_factory", "engine", "get_db", "init_models"]
