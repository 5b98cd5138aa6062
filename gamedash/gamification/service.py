"""Gamification service - profile providers."""

import asyncio
import copy
import logging
from abc import ABC, abstractmethod
from typing import Optional

from gamedash.core.config import get_settings
from gamedash.core.database import Database
from gamedash.core.exceptions import NotFoundException
from gamedash.gamification.models import GamificationProfile

logger = logging.getLogger(__name__)


PROFILE_TEMPLATE = {
    "user_id": "user123",
    "name": "Sarah Johnson",
    "avatar_url": "/placeholder.svg?height=120&width=120",
    "total_points": 2847,
    "streak_days": 15,
    "streak_multiplier": 2.3,
    "total_commands_executed": 1256,
    "badges": [
        {"id": "security-expert", "label": "Security Expert", "icon_url": "/icons/security.svg"},
        {"id": "speed-demon", "label": "Speed Demon", "icon_url": "/icons/speed.svg"},
        {"id": "problem-solver", "label": "Problem Solver", "icon_url": "/icons/psychology.svg"},
        {"id": "team-player", "label": "Team Player", "icon_url": "/icons/workspace_premium.svg"},
        {"id": "innovator", "label": "Innovator", "icon_url": "/icons/star.svg"},
        {"id": "champion", "label": "Champion", "icon_url": "/icons/emoji_events.svg"},
    ],
}


class ProfileProvider(ABC):
    """Returns the gamification profile for a user id."""

    @abstractmethod
    async def get_profile(self, user_id: str) -> GamificationProfile:
        ...


class MockProfileProvider(ProfileProvider):
    """
    Serves the fixed template profile with the requested user id.

    `delay` stands in for a data store round trip; pass 0 to skip it.
    """

    def __init__(self, delay: Optional[float] = None):
        if delay is None:
            delay = get_settings().MOCK_LATENCY_SECONDS
        self.delay = delay

    async def get_profile(self, user_id: str) -> GamificationProfile:
        await asyncio.sleep(self.delay)

        data = copy.deepcopy(PROFILE_TEMPLATE)
        data["user_id"] = user_id
        return GamificationProfile(**data)


class MongoProfileProvider(ProfileProvider):
    """Looks profiles up in the user_gamification collection."""

    def __init__(self, uri: Optional[str] = None, db_name: Optional[str] = None,
                 collection: Optional[str] = None):
        settings = get_settings()
        self.uri = uri
        self.db_name = db_name
        self.collection_name = collection or settings.GAMIFICATION_COLLECTION

    async def get_profile(self, user_id: str) -> GamificationProfile:
        """
        Fetch a stored profile. Each call owns its connection and closes it
        on every exit path.
        """
        async with Database(self.uri, self.db_name) as db:
            collection = db.get_collection(self.collection_name)
            document = await collection.find_one({"userId": user_id}, {"_id": 0})

        if not document:
            raise NotFoundException("User gamification data not found")

        return GamificationProfile.model_validate(document)


def get_profile_provider() -> ProfileProvider:
    """FastAPI dependency selecting the provider from PROFILE_BACKEND."""
    backend = get_settings().PROFILE_BACKEND.strip().lower()
    if backend == "mongo":
        return MongoProfileProvider()
    if backend != "mock":
        logger.warning(f"Unknown PROFILE_BACKEND '{backend}', falling back to mock")
    return MockProfileProvider()
