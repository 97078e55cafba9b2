"""
GraphQL Post Type

Defines the Post type for GraphQL queries. `author` and `categories` are
lazy field resolvers: they only hit the database when a query selects them,
and they look the related rows up by this post's ids every time.
"""

from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry.types import Info

from blog_api.graphql.context import GraphQLContext
from blog_api.models import Post
from blog_api.services.exceptions import NotFoundError

if TYPE_CHECKING:
    from blog_api.graphql.types.category import CategoryType
    from blog_api.graphql.types.user import UserType


@strawberry.type(name="Post")
class PostType:
    """
    GraphQL type representing a post.

    Timestamps are exposed as ISO-8601 strings.
    """

    id: int
    title: str
    description: str
    created_at: str
    updated_at: str
    author_id: strawberry.Private[int]

    @strawberry.field(description="The user who wrote the post")
    def author(
        self,
        info: Info[GraphQLContext, None],
    ) -> Annotated["UserType", strawberry.lazy("blog_api.graphql.types.user")]:
        from blog_api.graphql.types.user import user_to_graphql

        user = info.context.repository.get_user(self.author_id)
        if user is None:
            raise NotFoundError(f"Author of post {self.id} not found")
        return user_to_graphql(user)

    @strawberry.field(description="Categories attached to the post")
    def categories(
        self,
        info: Info[GraphQLContext, None],
    ) -> list[
        Annotated["CategoryType", strawberry.lazy("blog_api.graphql.types.category")]
    ]:
        from blog_api.graphql.types.category import category_to_graphql

        categories = info.context.repository.list_categories_for_post(self.id)
        return [category_to_graphql(c) for c in categories]


def post_to_graphql(post: Post) -> PostType:
    """Convert SQLAlchemy Post model to GraphQL PostType."""
    return PostType(
        id=post.id,
        title=post.title,
        description=post.description,
        created_at=post.created_at.isoformat(),
        updated_at=post.updated_at.isoformat(),
        author_id=post.author_id,
    )
