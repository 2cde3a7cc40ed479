import pytest
from fastapi.testclient import TestClient

from main import app
from reading_tracker.core.firebase_config import get_db

from fake_firestore import FakeFirestore


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def client(fake_db):
    app.dependency_overrides[get_db] = lambda: fake_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def as_user():
    def headers(uid="u1"):
        return {"x-user-id": uid}
    return headers
