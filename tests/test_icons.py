"""Tests for badge icon resolution and metric formatting."""

import pytest

from gamedash.dashboard.icons import (
    DEFAULT_ICON,
    badge_type_from_icon_url,
    format_multiplier,
    icon_for_badge,
    icon_for_badge_type,
)
from gamedash.gamification.models import Badge, BadgeType


class TestBadgeIcons:

    @pytest.mark.parametrize("icon_url, expected", [
        ("/icons/security.svg", "security"),
        ("/icons/speed.svg", "speed"),
        ("/icons/psychology.svg", "psychology"),
        ("/icons/workspace_premium.svg", "workspace_premium"),
        ("/icons/star.svg", "star"),
        ("/icons/emoji_events.svg", "emoji_events"),
    ])
    def test_known_icons(self, icon_url, expected):
        badge = Badge(id="b", label="B", icon_url=icon_url)
        assert icon_for_badge(badge) == expected

    @pytest.mark.parametrize("icon_url", ["/icons/unknown.svg", "", "/icons/"])
    def test_unknown_icons_fall_back_to_default(self, icon_url):
        badge = Badge(id="b", label="B", icon_url=icon_url)
        assert icon_for_badge(badge) == DEFAULT_ICON

    def test_badge_type_parsing(self):
        assert badge_type_from_icon_url("/icons/security.svg") == BadgeType.SECURITY
        assert badge_type_from_icon_url("https://cdn.example.com/icons/speed.png?v=2") == BadgeType.SPEED
        assert badge_type_from_icon_url("/icons/unknown.svg") is None

    def test_every_badge_type_has_an_icon(self):
        for badge_type in BadgeType:
            assert icon_for_badge_type(badge_type) == badge_type.value

    def test_none_maps_to_default(self):
        assert icon_for_badge_type(None) == DEFAULT_ICON


class TestFormatMultiplier:

    @pytest.mark.parametrize("value, expected", [
        (2.3, "2.3x"),
        (2, "2.0x"),
        (0, "0.0x"),
        (1.25, "1.2x"),
        (10.96, "11.0x"),
    ])
    def test_one_decimal_place(self, value, expected):
        assert format_multiplier(value) == expected
