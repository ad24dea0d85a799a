"""
Shared pytest fixtures: an in-memory database per test and an API client
wired to it.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

import portfolio.models  # noqa: F401
from portfolio.db.base import Base
from portfolio.db.session import get_db, make_engine
from portfolio.main import create_app
from portfolio.schemas.message import MessageCreate


@pytest.fixture
def engine():
    engine = make_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_message():
    """Build a valid submission, overriding any field."""

    def _make(**overrides):
        data = {
            "name": "Jane Doe",
            "email": "jane.doe@mailhost.org",
            "subject": "Project inquiry",
            "body": "Hello, I'd like to talk about a project with you.",
            "ip_address": "198.51.100.23",
        }
        data.update(overrides)
        return MessageCreate(**data)

    return _make


@pytest.fixture
def contact_form():
    return {
        "name": "Jane Doe",
        "email": "jane.doe@mailhost.org",
        "subject": "Project inquiry",
        "message": "Hello, I'd like to talk about a project with you.",
    }
