"""Gamification API endpoints."""

import logging

from fastapi import APIRouter, Depends

from gamedash.core.exceptions import AppException, ServerFaultException
from gamedash.gamification.models import ErrorResponse, GamificationProfile
from gamedash.gamification.service import ProfileProvider, get_profile_provider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user", tags=["Gamification"])


@router.get(
    "/{user_id}/gamification",
    response_model=GamificationProfile,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_gamification_profile(
    user_id: str,
    provider: ProfileProvider = Depends(get_profile_provider),
):
    """
    Get the gamification profile (points, streak, badges) for a user.
    The id is taken as-is from the path.
    """
    try:
        return await provider.get_profile(user_id)
    except AppException:
        raise
    except Exception:
        logger.exception(f"Error fetching gamification data for user {user_id}")
        raise ServerFaultException("Failed to fetch gamification data")
