"""HTTP client the dashboard uses to reach the gamification API."""

import logging
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from gamedash.core.config import get_settings
from gamedash.dashboard.exceptions import FetchFailure
from gamedash.gamification.models import GamificationProfile

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch gamification data"


class GamificationClient:
    """
    Thin async wrapper around the gamification endpoint.

    Pass an existing `httpx.AsyncClient` to share a connection pool (or to
    route requests through a test transport); otherwise one is created and
    owned by this instance.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        if http_client is None:
            http_client = httpx.AsyncClient(
                base_url=base_url or settings.API_BASE_URL,
                timeout=timeout if timeout is not None else settings.FETCH_TIMEOUT_SECONDS,
            )
            self._owns_client = True
        else:
            self._owns_client = False
        self._http = http_client

    async def fetch_profile(self, user_id: str) -> Optional[GamificationProfile]:
        """
        GET /api/user/{id}/gamification. Raises FetchFailure on any failure.

        A successful response with a JSON null body yields None.
        """
        url = f"/api/user/{quote(user_id, safe='')}/gamification"

        try:
            response = await self._http.get(url)
        except httpx.TimeoutException as e:
            raise FetchFailure(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise FetchFailure(str(e)) from e

        if not response.is_success:
            logger.info(f"Gamification fetch for {user_id} returned {response.status_code}")
            raise FetchFailure(FETCH_FAILED_MESSAGE, status_code=response.status_code)

        try:
            data = response.json()
            if data is None:
                return None
            return GamificationProfile.model_validate(data)
        except (ValueError, ValidationError) as e:
            raise FetchFailure(f"Invalid gamification data: {e}") from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "GamificationClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
