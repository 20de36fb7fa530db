# buildmate/db/database.py

from functools import lru_cache
from typing import Generator # Import Generator for the dependency return type hint

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, Session

from buildmate.core.config import Settings, get_settings


def build_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine with a bounded connection pool.

    The pool never grows past DB_POOL_SIZE; a request that cannot check out a
    connection within DB_POOL_TIMEOUT seconds fails.
    """
    url = make_url(settings.DATABASE_URL)

    if url.get_backend_name() == "sqlite":
        # Needed for SQLite since requests are served from a threadpool
        return create_engine(url, connect_args={"check_same_thread": False})

    connect_args = {"connect_timeout": settings.DB_CONNECT_TIMEOUT}
    if url.get_backend_name() == "postgresql" and settings.DB_SSLMODE:
        connect_args["sslmode"] = settings.DB_SSLMODE

    return create_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=0,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


@lru_cache
def get_engine() -> Engine:
    """The process-wide engine, created on first use."""
    return build_engine(get_settings())


@lru_cache
def get_session_factory() -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


# Dependency to get a database session
def get_db() -> Generator[Session, None, None]:
    db = get_session_factory()()
    try:
        yield db # Provide the session to the endpoint
    finally:
        db.close() # Returns the connection to the pool
