"""
SQLAlchemy Models Package

This package contains all database models for the blog API.

Model Relationships:
- User -> Post: One-to-Many (a post has exactly one author,
                a user may have any number of posts)
- Post -> Category: One-to-Many (a category is created for, and belongs to,
                    exactly one post)

Import all models here to:
1. Make them available as: from blog_api.models import User, Post, Category
2. Ensure Alembic discovers them for migrations
"""

# The order matters for SQLAlchemy to resolve relationships
from blog_api.models.user import User
from blog_api.models.post import Post
from blog_api.models.category import Category

__all__ = [
    "User",
    "Post",
    "Category",
]
