"""
RecipeGen Authentication Service
Credential store (bcrypt password hashes) and JWT token issuer
"""

from datetime import timedelta
from typing import Optional, Dict, Any, Tuple
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
import structlog

from core.config import Settings, get_settings
from core.exceptions import AuthError, ConflictError, InternalError, ValidationError
from middleware.logging import log_business_event
from models.user import User
from utils.date_utils import utcnow

logger = structlog.get_logger()

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=settings.BCRYPT_ROUNDS,
        )

        # JWT settings
        self.secret_key = settings.JWT_SECRET_KEY
        self.algorithm = settings.JWT_ALGORITHM
        self.token_expire = timedelta(hours=settings.JWT_EXPIRE_HOURS)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash"""
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            # Malformed or unknown hash in the store
            return False

    def get_password_hash(self, password: str) -> str:
        """Hash a password"""
        return self.pwd_context.hash(password)

    def create_access_token(self, user: User, expires_delta: Optional[timedelta] = None) -> str:
        """Create a signed token carrying the numeric user id and email"""
        expire = utcnow() + (expires_delta or self.token_expire)
        claims = {
            "id": user.id,
            "email": user.email,
            "exp": expire,
        }
        try:
            return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)
        except JWTError as e:
            logger.error("Token signing failed", error=str(e))
            raise InternalError("Error generating token")

    def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify signature and expiry and return the token claims"""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            raise AuthError(f"Invalid or expired token: {str(e)}")

        user_id = payload.get("id")
        if isinstance(user_id, bool) or not isinstance(user_id, (int, float)):
            raise AuthError("Invalid or expired token: missing user id")
        payload["id"] = int(user_id)
        return payload

    def register_user(self, db: Session, email: str, password: str, name: str) -> Tuple[str, User]:
        """Register a new user and return (token, user)"""
        email = (email or "").strip().lower()
        name = (name or "").strip()
        if not email or not password or not name:
            raise ValidationError("All fields are required")

        try:
            existing_user = db.query(User).filter(User.email == email).first()
        except SQLAlchemyError as e:
            logger.error("User lookup failed", error=str(e))
            raise InternalError("Error creating user")
        if existing_user:
            logger.warning("Registration failed", reason="user_exists")
            raise ConflictError("Email already registered")

        user = User(
            email=email,
            name=name,
            password_hash=self.get_password_hash(password),
        )

        try:
            db.add(user)
            db.commit()
            db.refresh(user)
        except IntegrityError:
            # Lost a race against a concurrent registration of the same email
            db.rollback()
            logger.warning("Registration failed", reason="user_exists")
            raise ConflictError("Email already registered")
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("User creation failed", error=str(e))
            raise InternalError("Error creating user")

        token = self.create_access_token(user)
        log_business_event("user_registered", {"user_id": user.id})
        return token, user

    def authenticate_user(self, db: Session, email: str, password: str) -> Tuple[str, User]:
        """
        Authenticate by email and password and return (token, user)

        Unknown email, empty password and wrong password all raise the same
        AuthError so callers cannot tell which one happened.
        """
        email = (email or "").strip().lower()
        try:
            user = db.query(User).filter(User.email == email).first()
        except SQLAlchemyError as e:
            logger.error("User lookup failed", error=str(e))
            raise InternalError("Error fetching user")

        if not user or not password or not self.verify_password(password, user.password_hash):
            logger.warning("Login failed", reason="invalid_credentials")
            raise AuthError(INVALID_CREDENTIALS)

        token = self.create_access_token(user)
        log_business_event("user_logged_in", {"user_id": user.id})
        return token, user


# Global auth service instance
auth_service = AuthService()
