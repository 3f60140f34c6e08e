import pytest
from fastapi.testclient import TestClient

from api.config import Settings
from api.services.todos import TodoStore
from index import create_app


@pytest.fixture()
def settings() -> Settings:
    """Settings that ignore any local .env file"""
    return Settings(_env_file=None, seed_todos=True, log_level="warning")


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def store(app) -> TodoStore:
    """The store behind the app, for asserting on state directly"""
    return app.state.todo_store
