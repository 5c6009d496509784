"""API test fixtures — isolated FastAPI apps + async HTTP clients.

Invariants:
    - Every test gets a fresh app built by create_app() with explicit Settings
    - .env files are ignored so local configuration cannot leak into tests

Design Decisions:
    - raise_app_exceptions=False: Starlette re-raises after the catch-all
      handler has produced its 500 response; tests assert on that response
"""

import pytest
from httpx import ASGITransport, AsyncClient

from calculator_api.config import Settings
from calculator_api.main import create_app

SMALL_BODY_LIMIT = 64


def make_settings(environment: str, **overrides) -> Settings:
    return Settings(_env_file=None, environment=environment, **overrides)


def make_client(app) -> AsyncClient:
    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    )


@pytest.fixture
def production_app():
    return create_app(make_settings("production"))


@pytest.fixture
def development_app():
    return create_app(make_settings("development"))


@pytest.fixture
async def client(production_app):
    """Client against a production-mode app."""
    async with make_client(production_app) as c:
        yield c


@pytest.fixture
async def dev_client(development_app):
    """Client against a development-mode app (stack traces exposed)."""
    async with make_client(development_app) as c:
        yield c


@pytest.fixture
async def small_body_client():
    """Client against an app that accepts at most SMALL_BODY_LIMIT bytes."""
    app = create_app(make_settings("production", max_body_bytes=SMALL_BODY_LIMIT))
    async with make_client(app) as c:
        yield c
