import pytest
from fastapi.testclient import TestClient

from app.core.store import JsonFileStore, get_store
from app.main import app


@pytest.fixture
def store(tmp_path) -> JsonFileStore:
    return JsonFileStore(tmp_path / "data.json")


@pytest.fixture
def client(store: JsonFileStore):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
