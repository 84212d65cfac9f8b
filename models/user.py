"""
User model for authentication
"""

from sqlalchemy import Column, String, DateTime, Integer
from sqlalchemy.orm import relationship

from core.database import Base
from utils.date_utils import utcnow, isoformat


class User(Base):
    """Registered user; owns recipes"""
    __tablename__ = "users"

    # Primary key
    id = Column(Integer, primary_key=True, index=True)

    # User credentials
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # Profile information
    name = Column(String(255), nullable=False, default="")

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    recipes = relationship("Recipe", back_populates="user")

    def to_dict(self):
        """Public representation; the password hash is never included"""
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
