"""
RecipeGen User Service
Profile management for the authenticated user
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import structlog

from core.exceptions import InternalError, NotFoundError, ValidationError
from models.user import User

logger = structlog.get_logger()


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def update_name(self, user_id: int, name: str) -> str:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Name is required")

        try:
            updated = (
                self.db.query(User)
                .filter(User.id == user_id)
                .update({User.name: name}, synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Profile update failed", user_id=user_id, error=str(e))
            raise InternalError("Error updating name")

        if not updated:
            raise NotFoundError("User not found")
        return name
