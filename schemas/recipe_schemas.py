"""
RecipeGen Recipe Schemas
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

# Columns the store cannot hold as NULL; a null in a partial update leaves them unchanged
REQUIRED_TEXT_FIELDS = ("title", "description", "ingredients", "steps", "cooking_time")


class RecipeBase(BaseModel):
    title: str = Field(default="", json_schema_extra={"example": "Tomato Soup"})
    description: str = ""
    ingredients: str = Field(default="", json_schema_extra={"example": "tomatoes, onion, stock"})
    steps: str = Field(default="", json_schema_extra={"example": "1. Chop\n2. Simmer\n3. Blend"})
    cooking_time: str = Field(default="", json_schema_extra={"example": "30 minutes"})
    image_url: Optional[str] = Field(default=None, max_length=500)


class RecipeCreate(RecipeBase):
    pass


class RecipeUpdate(BaseModel):
    """Partial update; only the fields sent are written"""
    title: Optional[str] = None
    description: Optional[str] = None
    ingredients: Optional[str] = None
    steps: Optional[str] = None
    cooking_time: Optional[str] = None
    image_url: Optional[str] = Field(default=None, max_length=500)

    def changes(self) -> dict:
        """Fields sent by the client, minus nulls for columns that cannot be cleared"""
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None or field not in REQUIRED_TEXT_FIELDS
        }


class Recipe(RecipeBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
