"""Global pytest configuration and fixtures."""

from datetime import date, timedelta
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from comic_store_api.app.core.config import settings
from comic_store_api.app.core.db import get_connection, init_db
from comic_store_api.app.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the application at a fresh SQLite file with the schema applied."""
    path = tmp_path / "comic_store_test.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def conn(db_path):
    connection = get_connection()
    try:
        yield connection
    finally:
        connection.close()


@pytest.fixture
def client(db_path):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def today() -> date:
    return date.today()


@pytest.fixture
def tomorrow() -> date:
    return date.today() + timedelta(days=1)


def user_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "first_name": "Mario",
        "last_name": "Rossi",
        "email": "mario.rossi@example.com",
        "password": "segreta",
        "address": "Via Roma 1, Milano",
        "registration_date": "2024-01-15",
        "role": "CLIENTE",
    }
    payload.update(overrides)
    return payload


def comic_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "title": "Dylan Dog 1",
        "author": "Tiziano Sclavi",
        "publisher": "Sergio Bonelli Editore",
        "description": "L'alba dei morti viventi",
        "publication_date": "1986-10-01",
        "available_for_auction": False,
        "category": "HORROR",
    }
    payload.update(overrides)
    return payload


# Larger than any SQLite INTEGER, so it can never name a stored row.
OUT_OF_RANGE_ID = 2 ** 70
