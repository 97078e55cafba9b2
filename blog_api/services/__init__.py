"""
Services Package

Persistence access and domain errors shared by the GraphQL resolvers.
"""

from blog_api.services.exceptions import (
    BlogAPIError,
    NotFoundError,
    UserNotFoundError,
    ValidationError,
)
from blog_api.services.repository import BlogRepository

__all__ = [
    "BlogAPIError",
    "BlogRepository",
    "NotFoundError",
    "UserNotFoundError",
    "ValidationError",
]
