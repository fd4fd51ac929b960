"""API test fixtures — application factory + async HTTP client.

Invariants:
    - Every test gets a freshly built app from explicit Settings
    - Requests go through httpx ASGITransport (no network, no server)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from parity_api.config import Settings
from parity_api.main import create_app


@pytest.fixture
def settings():
    return Settings(environment="development", https_redirect=False)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
