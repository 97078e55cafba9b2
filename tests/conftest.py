"""
pytest Fixtures for Blog API Tests

Shared fixtures used across all test files.

For database tests we use:
- session scope for the engine (expensive to create)
- function scope for sessions (isolation between tests)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set environment variables BEFORE importing the app so the module-level
# engine in blog_api.database never needs a PostgreSQL driver or server.
import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from blog_api.database import Base, get_db
from blog_api.main import app
from blog_api.models import Category, Post, User
from blog_api.services.repository import BlogRepository

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory: fast, isolated, no external database needed.


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the entire session.
    Without it, the in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # pysqlite defers BEGIN and mishandles SAVEPOINT; let SQLAlchemy emit
    # BEGIN itself so the per-test savepoints below roll back correctly.
    @event.listens_for(engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is joined to an outer transaction that's rolled back.
    create_savepoint mode turns the session's own commit() and rollback()
    into SAVEPOINT operations, so code under test can roll back a failed
    write without ending the outer transaction.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(
        bind=connection,
        join_transaction_mode="create_savepoint",
    )

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    get_db is overridden, and the GraphQL context depends on get_db, so
    every resolver uses the test session.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def repository(db_session: Session) -> BlogRepository:
    return BlogRepository(db_session)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_user(db_session: Session) -> User:
    """Create a sample user for testing."""
    user = User(email="user@example.com", name="Test User")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def second_user(db_session: Session) -> User:
    """Create a second user, without a name, with no posts."""
    user = User(email="second@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def sample_post(db_session: Session, sample_user: User) -> Post:
    """Create a post by sample_user with two categories."""
    post = Post(
        title="First post",
        description="Hello world",
        author=sample_user,
        categories=[Category(name="python"), Category(name="graphql")],
    )
    db_session.add(post)
    db_session.commit()
    db_session.refresh(post)
    return post


@pytest.fixture
def multiple_posts(db_session: Session, sample_user: User) -> list[Post]:
    """Create three posts by sample_user; every post has a 'news' category."""
    posts = []
    for i in range(3):
        post = Post(
            title=f"Post {i + 1}",
            description=f"Body {i + 1}",
            author=sample_user,
            categories=[Category(name="news"), Category(name=f"topic-{i + 1}")],
        )
        db_session.add(post)
        posts.append(post)

    db_session.commit()
    for post in posts:
        db_session.refresh(post)

    return posts


@pytest.fixture
def failing_category_insert() -> Generator[None, None, None]:
    """
    Make every Category INSERT fail with IntegrityError.

    The Post row is flushed before its categories, so this fails the write
    part-way through the post-and-categories transaction.
    """

    def reject_category(mapper, connection, target):
        raise IntegrityError(
            "INSERT INTO categories",
            {"name": target.name},
            Exception("categories insert rejected"),
        )

    event.listen(Category, "before_insert", reject_category)

    yield

    event.remove(Category, "before_insert", reject_category)
