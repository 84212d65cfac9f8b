"""
RecipeGen AI Schemas
Request/response models for the Gemini generation proxy
"""

from typing import Any, Dict, List
from pydantic import BaseModel, Field


class GenerateRecipesRequest(BaseModel):
    """Request model for recipe suggestions from an ingredient list"""
    ingredients: List[str] = Field(default=[], description="Ingredients the user has at hand")


class GenerateRecipesResponse(BaseModel):
    recipes: List[Dict[str, Any]] = []


class GenerateRecipeProcessRequest(BaseModel):
    """Request model for the full process of a named recipe"""
    recipe_name: str = Field(default="", description="Name of the recipe to expand")
