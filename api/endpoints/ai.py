"""
RecipeGen AI Endpoints
Gemini-backed recipe suggestions and recipe process generation
"""

from typing import Any, Dict
from fastapi import APIRouter, Depends

from core.dependencies import CurrentUserId
from schemas.ai_schemas import (
    GenerateRecipeProcessRequest,
    GenerateRecipesRequest,
    GenerateRecipesResponse,
)
from services.ai_service import AIServiceClient, get_ai_service

router = APIRouter()


@router.post("/generate-recipes", response_model=GenerateRecipesResponse)
async def generate_recipes(
    request: GenerateRecipesRequest,
    user_id: CurrentUserId,
    service: AIServiceClient = Depends(get_ai_service),
):
    """Suggest recipes that use some or all of the given ingredients"""
    recipes = await service.generate_recipes(request.ingredients)
    return GenerateRecipesResponse(recipes=recipes)


@router.post("/generate-recipe-process", response_model=Dict[str, Any])
async def generate_recipe_process(
    request: GenerateRecipeProcessRequest,
    user_id: CurrentUserId,
    service: AIServiceClient = Depends(get_ai_service),
):
    """Generate ingredients, steps, description and cooking time for a recipe name"""
    return await service.generate_recipe_process(request.recipe_name)
