"""
RecipeGen Recipe Service
Ownership-scoped CRUD over the recipe store
"""

from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import structlog

from core.exceptions import InternalError, NotFoundError
from models.recipe import Recipe
from schemas.recipe_schemas import RecipeCreate, RecipeUpdate
from utils.date_utils import utcnow

logger = structlog.get_logger()


class RecipeService:
    """CRUD operations; every read and update is scoped to the caller's active rows"""

    def __init__(self, db: Session):
        self.db = db

    def _active(self, user_id: int):
        return self.db.query(Recipe).filter(
            Recipe.user_id == user_id,
            Recipe.deleted_at.is_(None),
        )

    def list_recipes(self, user_id: int) -> List[Recipe]:
        try:
            return self._active(user_id).order_by(Recipe.id).all()
        except SQLAlchemyError as e:
            logger.error("Recipe listing failed", user_id=user_id, error=str(e))
            raise InternalError("Error fetching recipes")

    def create_recipe(self, user_id: int, data: RecipeCreate) -> Recipe:
        recipe = Recipe(user_id=user_id, **data.model_dump())
        try:
            self.db.add(recipe)
            self.db.commit()
            self.db.refresh(recipe)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Recipe creation failed", user_id=user_id, error=str(e))
            raise InternalError("Error creating recipe")
        return recipe

    def get_recipe(self, user_id: int, recipe_id: int) -> Recipe:
        try:
            recipe = self._active(user_id).filter(Recipe.id == recipe_id).first()
        except SQLAlchemyError as e:
            logger.error("Recipe lookup failed", user_id=user_id, recipe_id=recipe_id, error=str(e))
            raise InternalError("Error fetching recipe")
        if not recipe:
            raise NotFoundError("Recipe not found")
        return recipe

    def update_recipe(self, user_id: int, recipe_id: int, data: RecipeUpdate) -> Recipe:
        values = data.changes()
        recipe = self.get_recipe(user_id, recipe_id)

        for field, value in values.items():
            setattr(recipe, field, value)
        recipe.updated_at = utcnow()

        try:
            self.db.commit()
            self.db.refresh(recipe)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Recipe update failed", user_id=user_id, recipe_id=recipe_id, error=str(e))
            raise InternalError("Error updating recipe")
        return recipe

    def delete_recipe(self, recipe_id: int, caller_id: int = None) -> bool:
        """
        Permanently delete a recipe by id alone.

        Not scoped to the caller and not a soft delete, unlike every other
        recipe operation.
        """
        try:
            recipe = self.db.get(Recipe, recipe_id)
            if recipe is None:
                return False
            if caller_id is not None and recipe.user_id != caller_id:
                logger.warning(
                    "Hard delete of a recipe owned by another user",
                    recipe_id=recipe_id,
                    owner_id=recipe.user_id,
                    caller_id=caller_id,
                )
            self.db.delete(recipe)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Recipe deletion failed", recipe_id=recipe_id, error=str(e))
            raise InternalError("Error deleting recipe")
        return True
