"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import logfire
import pytest

# Configure logfire before importing modules that use it
logfire.configure(send_to_logfire=False, console=False)

from fastapi.testclient import TestClient  # noqa: E402

from eventhub.database import get_db  # noqa: E402
from eventhub.main import app  # noqa: E402


def make_cursor(documents: list[dict]) -> MagicMock:
    """Chainable Motor cursor stand-in that yields `documents`."""
    cursor = MagicMock(name="cursor")
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=documents)
    return cursor


def make_collection(name: str) -> MagicMock:
    collection = MagicMock(name=f"collection:{name}")
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.delete_one = AsyncMock()
    collection.find.return_value = make_cursor([])
    return collection


@pytest.fixture
def mock_db() -> MagicMock:
    """Database handle whose collections are mocks, created on first access."""
    collections: dict[str, MagicMock] = {}

    def get_collection(name: str) -> MagicMock:
        if name not in collections:
            collections[name] = make_collection(name)
        return collections[name]

    db = MagicMock(name="database")
    db.__getitem__.side_effect = get_collection
    return db


@pytest.fixture
def events_collection(mock_db) -> MagicMock:
    return mock_db["events"]


@pytest.fixture
def nudges_collection(mock_db) -> MagicMock:
    return mock_db["nudges"]


@pytest.fixture
def client(mock_db):
    app.dependency_overrides[get_db] = lambda: mock_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
