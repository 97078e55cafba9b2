"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the blog API.

We use SYNCHRONOUS SQLAlchemy: every GraphQL operation here is a handful of
short primary-key or indexed lookups. GraphQLRouter executes asynchronously
and calls sync resolvers directly on the event-loop thread.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Commit on success, rollback on failure
4. Close session when request ends

This is implemented using FastAPI's dependency injection (get_db), which the
GraphQL context depends on as well.
"""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from blog_api.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# - pool_size / max_overflow: connection pool bounds (not used by SQLite)
# - pool_pre_ping: test connection health before using it
# - echo: log all SQL statements in debug mode

if settings.is_sqlite:
    # SQLite connections are per-thread unless told otherwise, and resolvers
    # run in FastAPI's threadpool.
    engine = create_engine(
        settings.database_url,
        connect_args={"check_same_thread": False},
        echo=settings.debug,
    )
else:
    engine = create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.debug,
    )


# =============================================================================
# Session Factory
# =============================================================================
# - autocommit=False: we control when to commit
# - autoflush=False: don't auto-flush before queries

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover the tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Creates a new session, yields it to the request (REST handler or GraphQL
    context), and closes it when the request ends, even if an exception
    occurred.

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Useful for development and the seed script. In production, use Alembic
    migrations instead.
    """
    # Models must be imported so their tables are registered on Base.metadata
    import blog_api.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only for development resets and tests.
    """
    import blog_api.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
