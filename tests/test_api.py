"""Tests for the gamification API endpoints."""

import logging

import pytest

from gamedash.core.exceptions import NotFoundException
from gamedash.gamification.service import ProfileProvider, get_profile_provider


class FailingProvider(ProfileProvider):
    async def get_profile(self, user_id):
        raise RuntimeError("storage exploded")


class MissingProvider(ProfileProvider):
    async def get_profile(self, user_id):
        raise NotFoundException("User gamification data not found")


@pytest.mark.asyncio
async def test_health_checks(client):
    r = await client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"

    r = await client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "healthy"
    assert "profile_backend" in data


@pytest.mark.asyncio
async def test_get_profile_returns_camel_case_record(client):
    r = await client.get("/api/user/abc/gamification")

    assert r.status_code == 200
    data = r.json()
    assert data["userId"] == "abc"
    assert data["name"] == "Sarah Johnson"
    assert data["avatarUrl"] == "/placeholder.svg?height=120&width=120"
    assert data["totalPoints"] == 2847
    assert data["streakDays"] == 15
    assert data["streakMultiplier"] == 2.3
    assert data["totalCommandsExecuted"] == 1256
    assert len(data["badges"]) == 6
    assert data["badges"][0] == {
        "id": "security-expert",
        "label": "Security Expert",
        "iconUrl": "/icons/security.svg",
    }


@pytest.mark.asyncio
async def test_get_profile_is_idempotent(client):
    first = (await client.get("/api/user/repeat/gamification")).json()
    second = (await client.get("/api/user/repeat/gamification")).json()
    assert first == second


@pytest.mark.asyncio
async def test_user_id_is_not_validated(client):
    r = await client.get("/api/user/not%20a%20real%20id/gamification")
    assert r.status_code == 200
    assert r.json()["userId"] == "not a real id"


@pytest.mark.asyncio
async def test_provider_fault_returns_500(app, client, caplog):
    app.dependency_overrides[get_profile_provider] = lambda: FailingProvider()

    with caplog.at_level(logging.ERROR, logger="gamedash.gamification.views"):
        r = await client.get("/api/user/abc/gamification")

    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch gamification data"}
    assert any("abc" in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
async def test_missing_profile_returns_404(app, client):
    app.dependency_overrides[get_profile_provider] = lambda: MissingProvider()

    r = await client.get("/api/user/ghost/gamification")

    assert r.status_code == 404
    assert r.json() == {"error": "User gamification data not found"}
