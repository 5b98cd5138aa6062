"""Core module - config, database, exceptions."""

from gamedash.core.config import get_settings, Settings
from gamedash.core.database import Database
from gamedash.core.exceptions import (
    AppException,
    NotFoundException,
    ServerFaultException,
)

__all__ = [
    "get_settings",
    "Settings",
    "Database",
    "AppException",
    "NotFoundException",
    "ServerFaultException",
]
