"""
RecipeGen Authentication Endpoints
Registration and login
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.dependencies import get_auth_service
from services.auth_service import AuthService
from schemas.auth_schemas import UserCreate, UserLogin, User, AuthResponse

router = APIRouter(tags=["Authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account

    Returns a 24-hour bearer token and the created user. Duplicate emails
    are rejected with 400.
    """
    token, user = service.register_user(db, user_data.email, user_data.password, user_data.name)
    return AuthResponse(token=token, user=User.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(
    login_data: UserLogin,
    db: Session = Depends(get_db),
    service: AuthService = Depends(get_auth_service),
):
    """Authenticate user and return a bearer token"""
    token, user = service.authenticate_user(db, login_data.email, login_data.password)
    return AuthResponse(token=token, user=User.model_validate(user))
