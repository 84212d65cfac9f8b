"""
RecipeGen Error Taxonomy
Domain errors raised by services and rendered as HTTP errors by main.py
"""

from fastapi import status


class RecipeGenError(Exception):
    """Base class for errors surfaced to API callers"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RecipeGenError):
    """Missing or malformed input"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthError(RecipeGenError):
    """Bad credentials, or an invalid or expired token"""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class ConflictError(RecipeGenError):
    """Duplicate unique key"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists"


class NotFoundError(RecipeGenError):
    """No matching row owned by the caller"""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InternalError(RecipeGenError):
    """Store failure, signing failure or upstream API failure"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
