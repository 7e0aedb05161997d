# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("PYTEST_RUNNING", "true")

from student_sphere.core.access import Identity
from student_sphere.core.security import create_identity_token
from student_sphere.core.settings import settings
from student_sphere.db.session import Base
from student_sphere.db.session import get_db as app_get_session
from student_sphere.main import app as fastapi_app
from student_sphere.models import Post, PostCategory, User

TEST_DB_URL = "sqlite://"
ADMIN_EMAIL = "admin@uni.edu"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Ensure each test sees a clean database even though services commit.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture(autouse=True)
def admin_allow_list(monkeypatch: pytest.MonkeyPatch) -> str:
    """Configure a single administrator for every test."""
    monkeypatch.setattr(settings, "admin_emails", ADMIN_EMAIL)
    return ADMIN_EMAIL


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory persisting users."""

    def _make(user_id: str, email: str | None, name: str | None = None, **fields) -> User:
        user = User(id=user_id, email=email, name=name or user_id, **fields)
        db_session.add(user)
        db_session.commit()
        return user

    return _make


@pytest.fixture()
def author(make_user: Callable[..., User]) -> User:
    """Student who writes the posts under test."""
    return make_user("google-oauth2|alice", "alice@uni.edu", "Alice")


@pytest.fixture()
def reporter(make_user: Callable[..., User]) -> User:
    """Student who votes on and reports content."""
    return make_user("google-oauth2|bob", "bob@uni.edu", "Bob")


@pytest.fixture()
def admin_user(make_user: Callable[..., User]) -> User:
    """User whose email is on the admin allow-list."""
    return make_user("google-oauth2|carol", ADMIN_EMAIL, "Carol")


def identity_for(user: User) -> Identity:
    return Identity(id=user.id, email=user.email, name=user.name, image=user.image)


@pytest.fixture()
def admin_identity(admin_user: User) -> Identity:
    return identity_for(admin_user)


@pytest.fixture()
def author_identity(author: User) -> Identity:
    return identity_for(author)


def auth_headers(user: User) -> dict[str, str]:
    """Bearer headers carrying the user's identity assertion."""
    token = create_identity_token(identity_for(user))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def author_headers(author: User) -> dict[str, str]:
    return auth_headers(author)


@pytest.fixture()
def reporter_headers(reporter: User) -> dict[str, str]:
    return auth_headers(reporter)


@pytest.fixture()
def admin_headers(admin_user: User) -> dict[str, str]:
    return auth_headers(admin_user)


@pytest.fixture()
def calculus_post(db_session: Session, author: User) -> Post:
    """An academic post owned by ``author``."""
    post = Post(
        title="Help with calculus",
        description="How do I integrate x * e^x?",
        category=PostCategory.ACADEMIC.value,
        subject="Mathematics",
        user_id=author.id,
    )
    db_session.add(post)
    db_session.commit()
    return post
