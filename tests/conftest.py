from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from phrasebook.config import Settings
from phrasebook.db import database


@pytest.fixture
def db(tmp_path, monkeypatch):
    """Point the store at a fresh SQLite file and create the schema."""
    monkeypatch.setattr(database, "settings", Settings(DB_PATH=tmp_path / "words.db"))
    database.init_db()
    return database


@pytest.fixture
def client(db):
    from phrasebook.main import app

    with TestClient(app) as c:
        yield c
