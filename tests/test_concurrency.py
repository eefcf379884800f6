"""Concurrent writes through the ASGI app against a file-backed SQLite database."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import asyncio

import httpx
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from venues.database import create_tables, get_db
from venues.main import app
from venues.models.gate import Gate
from venues.models.place import Place


@pytest.fixture
def file_session_factory(tmp_path):
    # Short busy timeout: a request that waits on the write lock for longer fails.
    engine = create_engine(
        f"sqlite:///{tmp_path / 'venues.db'}",
        connect_args={"check_same_thread": False, "timeout": 2},
    )
    create_tables(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def file_app(file_session_factory):
    def override_get_db():
        session = file_session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


def place_body(name):
    return {
        "name": name,
        "address": "1 Main St",
        "city": "Springfield",
        "state": "SP",
        "gates": [{"name": "G"}],
    }


@pytest.mark.asyncio
async def test_concurrent_place_creates_both_succeed(file_app, file_session_factory):
    transport = httpx.ASGITransport(app=file_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        responses = await asyncio.gather(
            client.post("/places", json=place_body("Arena A")),
            client.post("/places", json=place_body("Stadium B")),
        )

    assert [r.status_code for r in responses] == [201, 201], [r.text for r in responses]

    session = file_session_factory()
    try:
        assert sorted(p.name for p in session.query(Place)) == ["Arena A", "Stadium B"]
        assert session.query(Gate).count() == 2
    finally:
        session.close()


@pytest.mark.asyncio
async def test_concurrent_updates_of_one_place_both_apply(file_app, file_session_factory):
    transport = httpx.ASGITransport(app=file_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        created = await client.post("/places", json=place_body("Arena A"))
        place_id = created.json()["id"]

        responses = await asyncio.gather(
            client.put(f"/places/{place_id}", json={"gates": [{"name": "North"}]}),
            client.put(f"/places/{place_id}", json={"turnstiles": [{"name": "T1"}]}),
        )

    assert [r.status_code for r in responses] == [200, 200], [r.text for r in responses]

    session = file_session_factory()
    try:
        place = session.query(Place).filter(Place.id == place_id).one()
        assert [g.name for g in place.gates] == ["North"]
        assert [t.name for t in place.turnstiles] == ["T1"]
    finally:
        session.close()
