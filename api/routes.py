"""
RecipeGen API Routes
Main router configuration for all API endpoints
"""

from fastapi import APIRouter
import structlog

from api.endpoints import auth, users, recipes, sync, ai, health

logger = structlog.get_logger()

# Create main API router
api_router = APIRouter()

api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

api_router.include_router(
    auth.router,
    tags=["authentication"]
)

api_router.include_router(
    users.router,
    tags=["users"]
)

# Sync routes go before the recipe routes so /recipes/sync/* is never read as a recipe id
api_router.include_router(
    sync.router,
    prefix="/recipes",
    tags=["sync"]
)

api_router.include_router(
    recipes.router,
    prefix="/recipes",
    tags=["recipes"]
)

api_router.include_router(
    ai.router,
    tags=["artificial-intelligence"]
)

logger.debug("API routes configured")
