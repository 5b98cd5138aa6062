"""
Gamification dashboard view controller.

Holds the page's local state and drives the Loading -> Success / Error state
machine. Point earning is local only; nothing is written back to the API.
"""

import asyncio
import logging
import time
from typing import Callable, Optional

from gamedash.core.config import get_settings
from gamedash.dashboard.client import GamificationClient
from gamedash.dashboard.exceptions import FetchFailure, InvalidTransition
from gamedash.dashboard.render import DashboardViewModel, build_view_model
from gamedash.dashboard.state import DashboardState, Notification, ViewStatus
from gamedash.gamification.models import GamificationProfile

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An error occurred"
POINT_EARNED_MESSAGE = "+1 point earned!"


class GamificationDashboard:
    """View state for one user's dashboard."""

    def __init__(
        self,
        user_id: str,
        client: GamificationClient,
        notification_duration: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if notification_duration is None:
            notification_duration = get_settings().NOTIFICATION_DURATION_SECONDS
        self.user_id = user_id
        self.client = client
        self.notification_duration = notification_duration
        self._clock = clock
        self.state = DashboardState(clock=clock)
        self._load_task: Optional[asyncio.Task] = None
        self._generation = 0

    @property
    def status(self) -> ViewStatus:
        return self.state.status

    @property
    def profile(self) -> Optional[GamificationProfile]:
        return self.state.profile

    @property
    def error(self) -> Optional[str]:
        return self.state.error

    @property
    def notification(self) -> Optional[Notification]:
        """The active notification, or None once it has expired."""
        return self.state.active_notification()

    def view_model(self) -> DashboardViewModel:
        """What the page should display right now."""
        return build_view_model(self.state)

    async def mount(self) -> None:
        await self.load()

    def unmount(self) -> None:
        """Abandon any in-flight load."""
        self._cancel_pending()

    async def load(self) -> None:
        """
        Fetch the profile and settle into SUCCESS or ERROR.

        A load started while another is in flight cancels the earlier one;
        the superseded load returns without touching state.
        """
        self._cancel_pending()
        generation = self._generation
        self.state.status = ViewStatus.LOADING
        self.state.error = None

        task = asyncio.ensure_future(self.client.fetch_profile(self.user_id))
        self._load_task = task
        profile: Optional[GamificationProfile] = None
        error: Optional[str] = None
        failed = False
        try:
            profile = await task
        except asyncio.CancelledError:
            if generation != self._generation:
                logger.debug(f"Superseded load for {self.user_id} cancelled")
                return
            raise
        except FetchFailure as e:
            failed, error = True, e.message
        except Exception as e:
            logger.exception(f"Unexpected error loading dashboard for {self.user_id}")
            failed, error = True, str(e)
        finally:
            if self._load_task is task:
                self._load_task = None

        if generation != self._generation:
            return
        if failed:
            self._fail(error)
            return
        self.state.status = ViewStatus.SUCCESS
        self.state.profile = profile

    async def retry(self) -> None:
        if self.state.status != ViewStatus.ERROR:
            raise InvalidTransition(f"Cannot retry from {self.state.status.value} state")
        await self.load()

    def earn_point(self) -> GamificationProfile:
        """Add one point to the displayed profile and raise a notification."""
        profile = self.state.profile
        if self.state.status != ViewStatus.SUCCESS or profile is None:
            raise InvalidTransition("Points can only be earned on a loaded profile")

        profile = profile.model_copy(update={"total_points": profile.total_points + 1})
        self.state.profile = profile
        self.state.notification = Notification(
            message=POINT_EARNED_MESSAGE,
            expires_at=self._clock() + self.notification_duration,
        )
        return profile

    def dismiss_notification(self) -> None:
        self.state.notification = None

    async def sync_points(self) -> None:
        """Push locally earned points to the provider. Not supported yet."""
        raise NotImplementedError("Locally earned points are not synced to the provider")

    def _fail(self, message: Optional[str]) -> None:
        self.state.status = ViewStatus.ERROR
        self.state.error = message or DEFAULT_ERROR_MESSAGE
        logger.info(f"Dashboard load for {self.user_id} failed: {self.state.error}")

    def _cancel_pending(self) -> None:
        self._generation += 1
        task = self._load_task
        self._load_task = None
        if task is not None and not task.done():
            task.cancel()
