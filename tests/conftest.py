import pytest
from fastapi.testclient import TestClient

from tourism_api.app.core.config import Settings
from tourism_api.app.main import create_app
from tourism_api.app.services.storage import MemStorage


@pytest.fixture
def storage() -> MemStorage:
    """A freshly seeded store."""
    return MemStorage()


@pytest.fixture
def empty_storage() -> MemStorage:
    return MemStorage(seed_demo_data=False)


@pytest.fixture
def app_settings() -> Settings:
    return Settings(api_prefix="/api", seed_demo_data=True, allowed_origins=["http://localhost:3000"])


@pytest.fixture
def client(storage, app_settings):
    app = create_app(storage=storage, app_settings=app_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_payload() -> dict:
    return {"username": "ama", "email": "ama@example.com", "password": "secret123"}
