"""
RecipeGen Middleware
Request logging and structured-log helpers
"""

from .logging import LoggingMiddleware, log_business_event, get_request_id

__all__ = [
    "LoggingMiddleware",
    "log_business_event",
    "get_request_id",
]
