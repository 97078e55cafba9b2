"""
GraphQL Context

Provides request context to all GraphQL resolvers:
- Database session for the request
- BlogRepository built on that session

The context is created fresh for each GraphQL request and passed to all
resolvers via the `info` parameter. It is a FastAPI dependency on get_db,
so the session is closed when the request ends and tests can swap it with
app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext

from blog_api.database import get_db
from blog_api.services.repository import BlogRepository


class GraphQLContext(BaseContext):
    """
    Context object available to all GraphQL resolvers.

    Attributes:
        db: SQLAlchemy database session
        repository: Persistence access used by every resolver
    """

    def __init__(self, db: Session, repository: BlogRepository | None = None):
        super().__init__()
        self.db = db
        self.repository = repository or BlogRepository(db)


async def get_context(db: Session = Depends(get_db)) -> GraphQLContext:
    """
    Create GraphQL context for each request.

    Strawberry resolves this like any FastAPI dependency, so get_db's
    session lifecycle applies.

    Returns:
        GraphQLContext with the request's session and repository
    """
    return GraphQLContext(db=db)
