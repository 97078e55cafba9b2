"""
GraphQL User Type

Defines the User type for GraphQL queries.
"""

from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry.types import Info

from blog_api.graphql.context import GraphQLContext
from blog_api.models import User

if TYPE_CHECKING:
    from blog_api.graphql.types.post import PostType


@strawberry.type(name="User")
class UserType:
    """
    GraphQL type representing a blog author.

    Maps to the User SQLAlchemy model. `posts` is resolved on demand.
    """

    id: int
    email: str
    name: str | None = None

    @strawberry.field(description="Posts written by this user")
    def posts(
        self,
        info: Info[GraphQLContext, None],
    ) -> list[
        Annotated["PostType", strawberry.lazy("blog_api.graphql.types.post")] | None
    ] | None:
        from blog_api.graphql.types.post import post_to_graphql

        posts = info.context.repository.list_posts_by_author(self.id)
        return [post_to_graphql(p) for p in posts]


def user_to_graphql(user: User) -> UserType:
    """Convert SQLAlchemy User model to GraphQL UserType."""
    return UserType(
        id=user.id,
        email=user.email,
        name=user.name,
    )
