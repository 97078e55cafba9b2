"""
Blog GraphQL API Application Package

GraphQL API over users, their posts, and the categories attached to posts.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- main.py: FastAPI application factory and configuration
- models/: SQLAlchemy ORM models (User, Post, Category)
- services/: Persistence access and domain errors
- graphql/: Strawberry schema, query and mutation resolvers
"""

__version__ = "0.1.0"
