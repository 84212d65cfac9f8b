"""
RecipeGen Core Dependencies
FastAPI dependencies for authentication and service wiring
"""

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional, Annotated

from core.database import get_db
from core.exceptions import AuthError
from services.auth_service import AuthService, auth_service
from services.recipe_service import RecipeService
from services.sync_service import SyncService
from services.user_service import UserService

# Security scheme; missing credentials are reported as AuthError, not 403
security = HTTPBearer(auto_error=False)


def get_auth_service() -> AuthService:
    return auth_service


def get_current_user_id(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    service: AuthService = Depends(get_auth_service),
) -> int:
    """
    Resolve the authenticated user's id from the bearer token

    Raises:
        AuthError: If the token is missing, malformed, badly signed or expired
    """
    if not credentials or not credentials.credentials:
        raise AuthError("Missing or malformed bearer token")

    claims = service.verify_token(credentials.credentials)
    return claims["id"]


CurrentUserId = Annotated[int, Depends(get_current_user_id)]


def get_recipe_service(db: Session = Depends(get_db)) -> RecipeService:
    return RecipeService(db)


def get_sync_service(db: Session = Depends(get_db)) -> SyncService:
    return SyncService(db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)
