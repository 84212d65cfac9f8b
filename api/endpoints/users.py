"""
RecipeGen User Endpoints
Profile updates for the authenticated user
"""

from fastapi import APIRouter, Depends

from core.dependencies import CurrentUserId, get_user_service
from schemas.auth_schemas import ProfileResponse, ProfileUpdate
from services.user_service import UserService

router = APIRouter()


@router.put("/profile", response_model=ProfileResponse)
def update_user_profile(
    profile: ProfileUpdate,
    user_id: CurrentUserId,
    service: UserService = Depends(get_user_service),
):
    """Update the caller's display name"""
    return ProfileResponse(name=service.update_name(user_id, profile.name))
