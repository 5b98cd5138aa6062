"""Badge icon resolution and metric formatting."""

from typing import Optional
from urllib.parse import urlparse

from gamedash.gamification.models import Badge, BadgeType

DEFAULT_ICON = "star"

# Material icon names per badge type
BADGE_ICONS = {
    BadgeType.STAR: "star",
    BadgeType.SECURITY: "security",
    BadgeType.SPEED: "speed",
    BadgeType.PSYCHOLOGY: "psychology",
    BadgeType.WORKSPACE_PREMIUM: "workspace_premium",
    BadgeType.EMOJI_EVENTS: "emoji_events",
}


def badge_type_from_icon_url(icon_url: str) -> Optional[BadgeType]:
    """
    Derive the badge type from an icon path.

    "/icons/security.svg" -> BadgeType.SECURITY. Returns None for paths whose
    file name is not a known badge type.
    """
    path = urlparse(icon_url or "").path
    filename = path.rstrip("/").rsplit("/", 1)[-1]
    key = filename.split(".", 1)[0]
    try:
        return BadgeType(key)
    except ValueError:
        return None


def icon_for_badge_type(badge_type: Optional[BadgeType]) -> str:
    if badge_type is None:
        return DEFAULT_ICON
    return BADGE_ICONS.get(badge_type, DEFAULT_ICON)


def icon_for_badge(badge: Badge) -> str:
    return icon_for_badge_type(badge_type_from_icon_url(badge.icon_url))


def format_multiplier(value: float) -> str:
    """Streak multiplier with exactly one decimal place: 2 -> "2.0x"."""
    return f"{value:.1f}x"
