"""Shared fixtures: an in-memory SQLite database and a TestClient wired to it."""

import sys
import os
import tempfile
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Must be set before venues.config is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "venues-test-logs"))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from venues.database import create_tables, get_db
from venues.models.gate import Gate
from venues.models.place import Place
from venues.models.turnstile import Turnstile


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def make_place(db):
    """Insert a place (and optional gate/turnstile names) directly, bypassing the service."""

    def _make(name="Arena A", gates=(), turnstiles=(), city="Springfield"):
        place = Place(name=name, address="1 Main St", city=city, state="SP")
        db.add(place)
        db.flush()
        for gate_name in gates:
            db.add(Gate(name=gate_name, place_id=place.id))
        for turnstile_name in turnstiles:
            db.add(Turnstile(name=turnstile_name, place_id=place.id))
        db.commit()
        return place

    return _make


@pytest.fixture
def client(session_factory):
    from fastapi.testclient import TestClient
    from venues.main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
