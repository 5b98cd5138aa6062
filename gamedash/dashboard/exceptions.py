"""Dashboard view exceptions."""

from typing import Optional


class DashboardError(Exception):
    """Base class for dashboard view errors."""


class FetchFailure(DashboardError):
    """The profile request failed (network error or non-success status)."""

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidTransition(DashboardError):
    """An operation was invoked from a state that does not allow it."""
