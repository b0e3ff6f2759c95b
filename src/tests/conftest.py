import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from taskboard.config import Settings
from taskboard.database import create_db_and_tables
from taskboard.main import create_app

TEST_SETTINGS = Settings(database_url="sqlite://", jwt_secret_key="test-secret", log_level="WARNING")
API = "/api/v1"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def client(engine):
    app = create_app(TEST_SETTINGS, engine)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def register(client):
    """Sign a user up and in; returns (user id, auth headers)."""

    def _register(nickname: str, password: str = "secret123"):
        response = client.post(
            f"{API}/users/signup",
            json={"nickname": nickname, "email": f"{nickname}@example.com", "password": password},
        )
        assert response.status_code == 200, response.json()
        uid = response.json()["data"]["uid"]

        response = client.post(f"{API}/users/signin", json={"nickname": nickname, "password": password})
        assert response.status_code == 200, response.json()
        token = response.json()["data"]["token"]
        return uid, {"Authorization": f"Bearer {token}"}

    return _register
