"""
RecipeGen API Endpoints
All API endpoint modules
"""

from . import health, auth, users, recipes, sync, ai

__all__ = [
    "health",
    "auth",
    "users",
    "recipes",
    "sync",
    "ai",
]
