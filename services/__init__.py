"""
RecipeGen Services Module
Core business logic and AI services
"""

from .auth_service import AuthService, auth_service
from .user_service import UserService
from .recipe_service import RecipeService
from .sync_service import SyncService
from .ai_service import AIServiceClient, ai_service, get_ai_service
from .prompt_engineering import PromptTemplates, prompt_templates, extract_json

__all__ = [
    "AuthService",
    "auth_service",
    "UserService",
    "RecipeService",
    "SyncService",

    # AI Service
    "AIServiceClient",
    "ai_service",
    "get_ai_service",

    # Prompt Engineering
    "PromptTemplates",
    "prompt_templates",
    "extract_json",
]
