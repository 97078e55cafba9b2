"""
GraphQL Types Package

GraphQL type definitions that map to the SQLAlchemy models, written with
Strawberry's decorator syntax. Schema names are User, Post and Category.

Relationship fields (User.posts, Post.author, Post.categories, Category.post)
are resolver methods on the types, so they only run when selected.
"""

from blog_api.graphql.types.category import CategoryType, category_to_graphql
from blog_api.graphql.types.post import PostType, post_to_graphql
from blog_api.graphql.types.user import UserType, user_to_graphql

__all__ = [
    "CategoryType",
    "PostType",
    "UserType",
    "category_to_graphql",
    "post_to_graphql",
    "user_to_graphql",
]
