"""Dashboard rendering - view models per state and the HTML page."""

from html import escape
from typing import List, Optional

from pydantic import BaseModel

from gamedash.dashboard.icons import format_multiplier, icon_for_badge
from gamedash.dashboard.state import DashboardState, ViewStatus

EMPTY_MESSAGE = "No gamification data found"


class MetricTile(BaseModel):
    key: str
    label: str
    value: str
    icon: str
    color: str


class BadgeTile(BaseModel):
    id: str
    label: str
    icon: str


class ProfileHeader(BaseModel):
    user_id: str
    name: str
    avatar_url: str


class DashboardViewModel(BaseModel):
    """
    Everything the page shows for one state.

    kind is one of "loading", "error", "empty" or "profile"; only the fields
    relevant to that kind are set.
    """
    kind: str
    error: Optional[str] = None
    message: Optional[str] = None
    header: Optional[ProfileHeader] = None
    metrics: List[MetricTile] = []
    badges: List[BadgeTile] = []
    notification: Optional[str] = None


def build_view_model(state: DashboardState, now: Optional[float] = None) -> DashboardViewModel:
    """
    Map dashboard state to what should be displayed.

    Notifications past their expiry are left out; `now` defaults to the
    state's clock.
    """
    if state.status == ViewStatus.LOADING:
        return DashboardViewModel(kind="loading")

    if state.status == ViewStatus.ERROR:
        return DashboardViewModel(kind="error", error=state.error)

    profile = state.profile
    if profile is None:
        return DashboardViewModel(kind="empty", message=EMPTY_MESSAGE)

    metrics = [
        MetricTile(key="total_points", label="Total Points", value=str(profile.total_points),
                   icon="trending_up", color="#1976d2"),
        MetricTile(key="streak_days", label="Streak Days", value=str(profile.streak_days),
                   icon="local_fire_department", color="#ff5722"),
        MetricTile(key="streak_multiplier", label="Multiplier",
                   value=format_multiplier(profile.streak_multiplier),
                   icon="close", color="#4caf50"),
        MetricTile(key="total_commands_executed", label="Commands",
                   value=str(profile.total_commands_executed),
                   icon="terminal", color="#9c27b0"),
    ]
    notification = state.active_notification(now)
    badges = [
        BadgeTile(id=badge.id, label=badge.label, icon=icon_for_badge(badge))
        for badge in profile.badges
    ]

    return DashboardViewModel(
        kind="profile",
        header=ProfileHeader(
            user_id=profile.user_id,
            name=profile.name,
            avatar_url=profile.avatar_url,
        ),
        metrics=metrics,
        badges=badges,
        notification=notification.message if notification else None,
    )


def _render_metric(m: MetricTile) -> str:
    value_id = ' id="total-points"' if m.key == "total_points" else ""
    return f"""    <div class="card metric" data-metric="{m.key}">
        <span class="material-icons" style="color: {m.color};">{m.icon}</span>
        <div class="metric-value" style="color: {m.color};"{value_id}>{escape(m.value)}</div>
        <div class="metric-label">{escape(m.label)}</div>
    </div>"""


def _render_body(view: DashboardViewModel, retry_url: str, notification_ms: int) -> str:
    if view.kind == "loading":
        return '<div class="center"><div class="spinner" role="progressbar" aria-busy="true"></div></div>'

    if view.kind == "error":
        return f"""
<div class="center column">
    <div class="alert alert-error" role="alert">{escape(view.error or "")}</div>
    <a class="button" href="{escape(retry_url)}">Retry</a>
</div>"""

    if view.kind == "empty":
        return f'<div class="alert alert-info" role="status">{escape(view.message or "")}</div>'

    header = view.header
    metric_html = "\n".join(_render_metric(m) for m in view.metrics)
    badge_html = "\n".join(
        f"""    <div class="card badge" data-badge="{escape(b.id)}">
        <span class="badge-icon material-icons">{b.icon}</span>
        <span class="chip">{escape(b.label)}</span>
    </div>"""
        for b in view.badges
    )

    toast_hidden = "" if view.notification else " hidden"
    toast_message = escape(view.notification or "")

    return f"""
<div class="layout">
    <aside class="card profile">
        <img class="avatar" src="{escape(header.avatar_url)}" alt="{escape(header.name)}">
        <h2>{escape(header.name)}</h2>
        <p class="subtitle">Team Member</p>
        <button type="button" class="button" id="earn-point">Earn Point</button>
    </aside>
    <main>
        <h3>Performance Metrics</h3>
        <section class="metrics">
{metric_html}
        </section>
        <h3>Achievements &amp; Badges</h3>
        <section class="badges">
{badge_html}
        </section>
    </main>
</div>
<div class="toast" id="toast" role="status"{toast_hidden}>
    <span id="toast-message">{toast_message}</span>
    <button type="button" id="toast-close" aria-label="Dismiss">&times;</button>
</div>
<script>
(function () {{
    var points = document.getElementById("total-points");
    var toast = document.getElementById("toast");
    var timer = null;
    function hide() {{ toast.hidden = true; }}
    if (!toast.hidden) {{ timer = setTimeout(hide, {notification_ms}); }}
    document.getElementById("earn-point").addEventListener("click", function () {{
        points.textContent = String(parseInt(points.textContent, 10) + 1);
        document.getElementById("toast-message").textContent = "+1 point earned!";
        toast.hidden = false;
        clearTimeout(timer);
        timer = setTimeout(hide, {notification_ms});
    }});
    document.getElementById("toast-close").addEventListener("click", hide);
}})();
</script>"""


def render_page(view: DashboardViewModel, retry_url: str = "",
                notification_seconds: float = 3.0) -> str:
    """Render a full HTML document for the dashboard."""
    body = _render_body(view, retry_url, int(notification_seconds * 1000))
    title = f"{view.header.name} - Gamification" if view.header else "Gamification"
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)}</title>
    <link rel="stylesheet" href="https://fonts.googleapis.com/icon?family=Material+Icons">
    <style>
        body {{ margin: 0; font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Arial, sans-serif; background: #f5f5f5; }}
        .container {{ max-width: 1200px; margin: 0 auto; padding: 32px 16px; }}
        .center {{ display: flex; justify-content: center; align-items: center; min-height: 400px; }}
        .column {{ flex-direction: column; gap: 16px; min-height: 0; }}
        .spinner {{ width: 60px; height: 60px; border: 6px solid #e3f2fd; border-top-color: #1976d2; border-radius: 50%; animation: spin 1s linear infinite; }}
        @keyframes spin {{ to {{ transform: rotate(360deg); }} }}
        .alert {{ padding: 12px 16px; border-radius: 4px; width: 100%; max-width: 600px; }}
        .alert-error {{ background: #fdeded; color: #5f2120; }}
        .alert-info {{ background: #e5f6fd; color: #014361; }}
        .button {{ background: #1976d2; color: #fff; border: 0; border-radius: 4px; padding: 8px 22px; font-size: 15px; text-decoration: none; cursor: pointer; }}
        .layout {{ display: grid; grid-template-columns: 1fr 2fr; gap: 24px; }}
        .card {{ background: #fff; border-radius: 8px; box-shadow: 0 2px 6px rgba(0,0,0,0.12); padding: 16px; text-align: center; }}
        .profile {{ background: linear-gradient(135deg, #1976d2 0%, #1565c0 100%); color: #fff; display: flex; flex-direction: column; align-items: center; justify-content: center; gap: 12px; min-height: 300px; }}
        .avatar {{ width: 120px; height: 120px; border-radius: 50%; border: 4px solid rgba(255,255,255,0.2); }}
        .metrics {{ display: grid; grid-template-columns: repeat(4, 1fr); gap: 16px; }}
        .metric-value {{ font-size: 34px; font-weight: bold; }}
        .metric-label {{ color: #666; font-size: 14px; }}
        .badges {{ display: grid; grid-template-columns: repeat(3, 1fr); gap: 16px; }}
        .badge-icon {{ background: #1976d2; color: #fff; border-radius: 50%; width: 56px; height: 56px; line-height: 56px; display: inline-block; }}
        .chip {{ display: block; margin-top: 8px; color: #1976d2; border: 1px solid #1976d2; border-radius: 16px; padding: 2px 10px; font-size: 13px; }}
        .toast {{ position: fixed; right: 24px; bottom: 24px; background: #2e7d32; color: #fff; padding: 12px 16px; border-radius: 4px; }}
        .toast button {{ background: none; border: 0; color: #fff; font-size: 18px; cursor: pointer; }}
        h3 {{ color: #1976d2; }}
    </style>
</head>
<body>
<div class="container">
{body}
</div>
</body>
</html>
"""
