"""Shared fixtures: an in-memory SQLite store loaded with the demo dataset."""

import os
import sys

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.pool import StaticPool

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tradebook.config import Settings
from tradebook.database import Base, create_session_factory
from tradebook.main import create_app
from tradebook.seed import load_demo_data


def _memory_engine():
    # StaticPool keeps a single connection so every session sees the same database
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def engine():
    engine = _memory_engine()
    Base.metadata.create_all(bind=engine)
    db = create_session_factory(engine)()
    try:
        load_demo_data(db)
    finally:
        db.close()
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app_settings():
    return Settings(CREATE_SCHEMA=False, SEED_DEMO_DATA=False, LOG_LEVEL="WARNING")


@pytest.fixture
def client(engine, app_settings):
    return TestClient(create_app(app_settings, engine=engine))


@pytest.fixture
def statements(engine):
    """Record every SQL statement sent through the engine."""
    seen = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        seen.append(statement)

    event.listen(engine, "before_cursor_execute", _record)
    yield seen
    event.remove(engine, "before_cursor_execute", _record)
