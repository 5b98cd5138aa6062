"""Dashboard view state."""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from gamedash.gamification.models import GamificationProfile


class ViewStatus(str, Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class Notification:
    """Transient toast shown after a local action."""
    message: str
    expires_at: float

    def expired(self, now: float) -> bool:
        return now >= self.expires_at


@dataclass
class DashboardState:
    status: ViewStatus = ViewStatus.LOADING
    profile: Optional[GamificationProfile] = None
    error: Optional[str] = None
    notification: Optional[Notification] = None
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def active_notification(self, now: Optional[float] = None) -> Optional[Notification]:
        """The notification, or None once it has expired (dropping it)."""
        if self.notification is None:
            return None
        if now is None:
            now = self.clock()
        if self.notification.expired(now):
            self.notification = None
        return self.notification
