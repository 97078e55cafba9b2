"""
GraphQL Category Type

Defines the Category type for GraphQL queries.
"""

from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry.types import Info

from blog_api.graphql.context import GraphQLContext
from blog_api.models import Category
from blog_api.services.exceptions import NotFoundError

if TYPE_CHECKING:
    from blog_api.graphql.types.post import PostType


@strawberry.type(name="Category")
class CategoryType:
    """
    GraphQL type representing a category attached to one post.

    Maps to the Category SQLAlchemy model.
    """

    id: int
    name: str

    @strawberry.field(description="The post this category belongs to")
    def post(
        self,
        info: Info[GraphQLContext, None],
    ) -> Annotated["PostType", strawberry.lazy("blog_api.graphql.types.post")]:
        from blog_api.graphql.types.post import post_to_graphql

        post = info.context.repository.get_post_for_category(self.id)
        if post is None:
            raise NotFoundError(f"Post for category {self.id} not found")
        return post_to_graphql(post)


def category_to_graphql(category: Category) -> CategoryType:
    """Convert SQLAlchemy Category model to GraphQL CategoryType."""
    return CategoryType(id=category.id, name=category.name)
