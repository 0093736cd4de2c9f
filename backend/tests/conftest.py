"""Pytest fixtures: a temporary deck directory per test and a client bound to it."""
import os
import logging
import warnings

import pytest
from fastapi.testclient import TestClient

logging.getLogger('sqlalchemy').setLevel(logging.ERROR)
logging.getLogger('sqlalchemy.engine').setLevel(logging.ERROR)
logging.getLogger('sqlalchemy.pool').setLevel(logging.ERROR)

warnings.filterwarnings("ignore", category=DeprecationWarning)

os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ["DEEPSEEK_API_KEY"] = "test-api-key"
os.environ["DEEPSEEK_HINT_PROMPT"] = "Front: {front_message}\nBack: {back_message}"

from flashcards.main import app
from flashcards.api.deps import get_hint_generator
from flashcards.db.store import StoreManager
from flashcards.services.card_service import CardService


class FakeHintGenerator:
    def __init__(self, hint: str = "Think of the capital."):
        self.hint = hint
        self.calls = []

    def generate(self, front: str, back: str) -> str:
        self.calls.append((front, back))
        return self.hint


@pytest.fixture(scope="function")
def store(tmp_path):
    manager = StoreManager(tmp_path / "db", pool_size=5)
    manager.connect("cards.db")
    yield manager
    manager.close()


@pytest.fixture(scope="function")
def db(store):
    with store.session() as session:
        yield session


@pytest.fixture(scope="function")
def client(store) -> TestClient:
    app.state.store = store
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture(scope="function")
def auth_client(client: TestClient) -> TestClient:
    """Client whose session is logged in as a freshly signed-up user."""
    response = client.post(
        "/signup",
        data={"username": "testuser", "password": "password123"},
    )
    assert response.status_code == 200
    return client


@pytest.fixture(scope="function")
def hint_generator(client: TestClient) -> FakeHintGenerator:
    fake = FakeHintGenerator()
    app.dependency_overrides[get_hint_generator] = lambda: fake
    return fake


@pytest.fixture(scope="function")
def card(db):
    return CardService.insert_card(db, card_type=1, front="Capital of France", back="Paris")
