import mongomock
import pytest
from fastapi.testclient import TestClient

from emporium.api.deps import get_db
from emporium.main import app


@pytest.fixture
def db():
    return mongomock.MongoClient()["espressoDB"]


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()
