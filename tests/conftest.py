"""
Shared fixtures: an in-memory database per test, a scripted LLM, and an
API client wired to both.
"""

import os

# Must be set before physics_tutor.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["RESET_DATABASE"] = "false"
os.environ["ADMIN_EMAILS"] = "admin@example.com"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.setdefault("OPENAI_API_KEY", "test-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from physics_tutor.database import make_engine, init_db, get_db, get_session_factory
from physics_tutor.main import app
from physics_tutor.tutor.llm import LLMResult, get_llm


class FakeLLM:
    """Scripted stand-in for the OpenAI provider.

    `responses` feed generate() in order; `chunks` feed generate_streaming().
    Set `stream_error` to raise after the chunks are sent.
    """

    def __init__(self, responses=None, chunks=None, stream_error=None):
        self.responses = list(responses or [])
        self.chunks = list(chunks or [])
        self.stream_error = stream_error
        self.calls = []

    def generate(self, messages, **kwargs):
        self.calls.append(messages)
        if not self.responses:
            raise AssertionError("FakeLLM ran out of scripted responses")
        text = self.responses.pop(0)
        if isinstance(text, Exception):
            raise text
        return LLMResult(text=text, latency_ms=1, model="fake", usage={})

    async def generate_streaming(self, messages, **kwargs):
        self.calls.append(messages)
        for chunk in self.chunks:
            yield chunk
        if self.stream_error is not None:
            raise self.stream_error


@pytest.fixture
def engine():
    eng = make_engine("sqlite://")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def client(session_factory, llm):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_llm] = lambda: llm
    # No context manager: the lifespan would initialize the real database
    yield TestClient(app)
    app.dependency_overrides.clear()


def _register(client, email, password="correct-horse-1"):
    resp = client.post("/api/auth/register", json={"email": email, "password": password})
    assert resp.status_code == 201, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def auth_headers(client):
    return _register(client, "student@example.com")


@pytest.fixture
def other_headers(client):
    return _register(client, "other@example.com")


@pytest.fixture
def admin_headers(client):
    return _register(client, "admin@example.com")
