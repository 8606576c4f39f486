"""Shared fixtures: in-memory database, fake PDF renderer, API client."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from job_vault.api.app import create_app
from job_vault.api.limiter import limiter, limits
from job_vault.auth import AuthUser, issue_token
from job_vault.config import Settings
from job_vault.db import PersistenceClient

JWT_SECRET = "test-secret"
PDF_BYTES = b"%PDF-1.4\n% fake resume\n"


class FakeRenderer:
    """Records the HTML it receives and returns canned bytes."""

    def __init__(self, content: bytes = PDF_BYTES, error: Exception | None = None):
        self.content = content
        self.error = error
        self.rendered: list[str] = []

    async def render(self, html: str) -> bytes:
        self.rendered.append(html)
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture(autouse=True)
def no_rate_limits():
    enabled, saved = limiter.enabled, dict(limits)
    limiter.enabled = False
    yield
    limiter.enabled = enabled
    limits.update(saved)
    limiter.reset()


@pytest.fixture
def persistence():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    client = PersistenceClient(jwt_secret=JWT_SECRET, engine=engine)
    client.create_all()
    yield client
    client.dispose()


@pytest.fixture
def db(persistence):
    session = persistence.session()
    yield session
    session.close()


@pytest.fixture
def user():
    return AuthUser(id="user-1", email="ada@example.com")


@pytest.fixture
def other_user():
    return AuthUser(id="user-2", email="grace@example.com")


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def test_settings():
    return Settings(jwt_secret=JWT_SECRET, show_detailed_errors=False, database_url="", rate_limit_enabled=False)


def make_client(persistence, renderer, config) -> TestClient:
    return TestClient(create_app(client=persistence, pdf_renderer=renderer, config=config))


@pytest.fixture
def api(persistence, renderer, test_settings):
    with make_client(persistence, renderer, test_settings) as client:
        yield client


def bearer(user_id: str) -> dict:
    return {"Authorization": f"Bearer {issue_token(user_id, JWT_SECRET, email=f'{user_id}@example.com')}"}


@pytest.fixture
def auth_headers(user):
    return bearer(user.id)


@pytest.fixture
def other_headers(other_user):
    return bearer(other_user.id)
