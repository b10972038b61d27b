"""
pytest configuration and fixtures.
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from users_api.app.core.config import Settings
from users_api.app.core.store import UserStore
from users_api.app.main import create_app


@pytest.fixture
def app() -> FastAPI:
    """Fresh application with its own seeded store."""
    return create_app(Settings(id_strategy="length", debug=False))


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def counter_client() -> Generator[TestClient, None, None]:
    """Client for an app that assigns ids from a monotonic counter."""
    with TestClient(create_app(Settings(id_strategy="counter", debug=False))) as test_client:
        yield test_client


@pytest.fixture
def store() -> UserStore:
    return UserStore.seeded()


@pytest.fixture
def carol() -> dict:
    return {"name": "Carol", "email": "carol@example.com"}
