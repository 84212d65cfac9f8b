"""
RecipeGen Core Module
Central configuration, persistence and error types
"""

from .config import settings, get_settings
from .database import Base, get_db, get_db_session, init_db, close_db

__all__ = [
    "settings",
    "get_settings",
    "Base",
    "get_db",
    "get_db_session",
    "init_db",
    "close_db",
]
