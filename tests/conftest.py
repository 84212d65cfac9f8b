# flake8: noqa
import os

# Settings are read once at import time
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret"
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from core.config import get_settings
from core.database import Base, get_db
from main import app
from services.ai_service import AIServiceClient, get_ai_service


@pytest.fixture
def engine():
    # StaticPool shares one in-memory database across connections
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client, email="alice@example.com", password="secret123", name="Alice"):
    res = client.post("/api/register", json={"email": email, "password": password, "name": name})
    assert res.status_code == 201, res.text
    return res.json()


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client):
    body = register(client)
    return {"id": body["user"]["id"], "headers": auth_headers(body["token"])}


@pytest.fixture
def bob(client):
    body = register(client, email="bob@example.com", password="hunter22", name="Bob")
    return {"id": body["user"]["id"], "headers": auth_headers(body["token"])}


class GeminiStub:
    """Canned generateContent responses served through httpx.MockTransport"""

    def __init__(self):
        self.status_code = 200
        self.body = None
        self.requests = []

    def reply_text(self, text):
        self.body = {"candidates": [{"content": {"parts": [{"text": text}]}}]}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body or "")


@pytest.fixture
def gemini(client):
    stub = GeminiStub()
    service = AIServiceClient(
        settings=get_settings(),
        client=httpx.AsyncClient(transport=httpx.MockTransport(stub.handler)),
    )
    app.dependency_overrides[get_ai_service] = lambda: service
    return stub
