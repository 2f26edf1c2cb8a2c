"""API test fixtures — in-memory store + FastAPI test client.

Invariants:
    - Every test gets a fresh FakeMongoClient
    - store_manager patched on the database module (the readiness flag routes check)
    - ASGITransport does not run the lifespan, so no real connection is attempted
"""

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

import lessons_api.infrastructure.database as db_module
from lessons_api.infrastructure.database import DocumentStoreManager
from lessons_api.main import app
from tests.api.mock_mongo import FakeMongoClient


@pytest.fixture
def fake_client():
    return FakeMongoClient()


@pytest.fixture
def fake_db(fake_client):
    return fake_client["lessons_test"]


@pytest.fixture
async def client(fake_client):
    """FastAPI test client with the store manager pointed at the fake."""
    original_manager = db_module.store_manager
    db_module.store_manager = DocumentStoreManager(fake_client, "lessons_test")

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.store_manager = original_manager


@pytest.fixture
async def uninitialized_client():
    """Test client with no store connection established."""
    original_manager = db_module.store_manager
    db_module.store_manager = None

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.store_manager = original_manager


@pytest.fixture
def seed_lessons(fake_db):
    """Five lessons with distinct prices."""
    lessons = fake_db["lessons"]
    for subject, location, price, spaces in [
        ("Math", "London", 100, 5),
        ("English", "Oxford", 80, 5),
        ("Music", "Hendon", 20, 3),
        ("Art", "Colindale", 90, 20),
        ("Chess 2000", "Brent Cross", 70, 4),
    ]:
        lessons.documents.append({
            "_id": ObjectId(),
            "subject": subject,
            "description": f"{subject} lessons in {location}",
            "location": location,
            "price": price,
            "availablespaces": spaces,
        })
    return lessons
