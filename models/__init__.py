"""
RecipeGen Database Models
Central import module for all database models
"""

from .user import User
from .recipe import Recipe

__all__ = [
    "User",
    "Recipe",
]
