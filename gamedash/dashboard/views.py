"""Dashboard page routes."""

from typing import AsyncIterator

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from gamedash.dashboard.client import GamificationClient
from gamedash.dashboard.controller import GamificationDashboard
from gamedash.dashboard.render import render_page

router = APIRouter(prefix="/user", tags=["Dashboard"])


async def get_gamification_client() -> AsyncIterator[GamificationClient]:
    """Client pointed at API_BASE_URL, closed after the request."""
    async with GamificationClient() as client:
        yield client


@router.get("/{user_id}/gamification", response_class=HTMLResponse)
async def gamification_page(
    user_id: str,
    request: Request,
    client: GamificationClient = Depends(get_gamification_client),
):
    """
    Render the gamification dashboard for a user.

    The page mounts a dashboard, waits for the profile load to settle and
    renders the resulting state. The response is only sent once the load
    has settled, so the Loading indicator never reaches a browser. Retry
    reloads this page.
    """
    dashboard = GamificationDashboard(user_id, client)
    try:
        await dashboard.mount()
    finally:
        dashboard.unmount()

    html = render_page(
        dashboard.view_model(),
        retry_url=str(request.url),
        notification_seconds=dashboard.notification_duration,
    )
    return HTMLResponse(content=html)
