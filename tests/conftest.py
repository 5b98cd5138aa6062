"""Shared fixtures: the FastAPI app wired to a zero-latency mock provider."""

import httpx
import pytest
import pytest_asyncio

from gamedash.dashboard.client import GamificationClient
from gamedash.dashboard.views import get_gamification_client
from gamedash.gamification.service import MockProfileProvider, get_profile_provider
from gamedash.main import app as fastapi_app

BASE_URL = "http://test"


@pytest.fixture
def app():
    fastapi_app.dependency_overrides[get_profile_provider] = lambda: MockProfileProvider(delay=0)
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    """HTTP client talking to the app in-process."""
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url=BASE_URL) as c:
        yield c


@pytest.fixture
def page_client(app):
    """
    Route the dashboard page's own API calls back into the app, so the page
    can be rendered without a running server.
    """
    async def override():
        http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url=BASE_URL)
        async with GamificationClient(http_client=http) as gamification_client:
            yield gamification_client
        await http.aclose()

    app.dependency_overrides[get_gamification_client] = override
    return app


def make_gamification_client(handler) -> GamificationClient:
    """GamificationClient backed by an httpx.MockTransport handler."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)
    return GamificationClient(http_client=http)
