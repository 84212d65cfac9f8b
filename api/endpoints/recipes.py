"""
RecipeGen Recipe Management Endpoints
Recipe CRUD operations scoped to the authenticated user
"""

from typing import List
from fastapi import APIRouter, Depends, Response, status

from core.dependencies import CurrentUserId, get_recipe_service
from schemas.recipe_schemas import Recipe, RecipeCreate, RecipeUpdate
from services.recipe_service import RecipeService

router = APIRouter()


@router.get("", response_model=List[Recipe])
def get_recipes(
    user_id: CurrentUserId,
    service: RecipeService = Depends(get_recipe_service),
):
    """List the caller's active recipes"""
    return service.list_recipes(user_id)


@router.post("", response_model=Recipe, status_code=status.HTTP_201_CREATED)
def create_recipe(
    recipe: RecipeCreate,
    user_id: CurrentUserId,
    service: RecipeService = Depends(get_recipe_service),
):
    return service.create_recipe(user_id, recipe)


@router.get("/{recipe_id}", response_model=Recipe)
def get_recipe(
    recipe_id: int,
    user_id: CurrentUserId,
    service: RecipeService = Depends(get_recipe_service),
):
    return service.get_recipe(user_id, recipe_id)


@router.put("/{recipe_id}", response_model=Recipe)
def update_recipe(
    recipe_id: int,
    recipe: RecipeUpdate,
    user_id: CurrentUserId,
    service: RecipeService = Depends(get_recipe_service),
):
    """Update the fields sent; 404 unless the caller owns an active recipe with this id"""
    return service.update_recipe(user_id, recipe_id, recipe)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(
    recipe_id: int,
    user_id: CurrentUserId,
    service: RecipeService = Depends(get_recipe_service),
):
    """
    Permanently delete a recipe

    Deletes by id alone: any authenticated caller can remove any recipe.
    """
    service.delete_recipe(recipe_id, caller_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
