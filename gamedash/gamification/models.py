"""Gamification models - profiles, badges and error responses."""

from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class BadgeType(str, Enum):
    """Known badge icon keys."""
    SECURITY = "security"
    SPEED = "speed"
    PSYCHOLOGY = "psychology"
    WORKSPACE_PREMIUM = "workspace_premium"
    STAR = "star"
    EMOJI_EVENTS = "emoji_events"


class Badge(BaseModel):
    """A named achievement. Immutable once issued."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    label: str
    icon_url: str


class GamificationProfile(BaseModel):
    """Gamification record for one user, serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str
    name: str
    avatar_url: str
    total_points: int = Field(ge=0)
    streak_days: int = Field(ge=0)
    streak_multiplier: float = Field(ge=0)
    total_commands_executed: int = Field(ge=0)
    badges: List[Badge] = []

    @field_validator("badges")
    @classmethod
    def badge_ids_unique(cls, badges: List[Badge]) -> List[Badge]:
        seen = set()
        for badge in badges:
            if badge.id in seen:
                raise ValueError(f"duplicate badge id: {badge.id}")
            seen.add(badge.id)
        return badges


class ErrorResponse(BaseModel):
    """Body of every failed API response."""
    error: str
