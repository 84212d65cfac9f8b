"""
RecipeGen Recipe Models
Database model for user-owned recipes with soft deletion
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from core.database import Base
from utils.date_utils import utcnow, isoformat


class Recipe(Base):
    """Recipe owned by a single user; rows with deleted_at set are inactive"""
    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    ingredients = Column(Text, nullable=False, default="")  # opaque, client formatted
    steps = Column(Text, nullable=False, default="")  # opaque, client formatted
    cooking_time = Column(Text, nullable=False, default="")  # free text
    image_url = Column(String(500))

    # User relationship
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    user = relationship("User", back_populates="recipes")

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow, index=True)
    deleted_at = Column(DateTime(timezone=True), index=True)

    def to_dict(self):
        """Convert recipe to dictionary"""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "description": self.description,
            "ingredients": self.ingredients,
            "steps": self.steps,
            "cooking_time": self.cooking_time,
            "image_url": self.image_url,
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<Recipe(id={self.id}, user_id={self.user_id}, title={self.title!r})>"
