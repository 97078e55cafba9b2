"""
GraphQL Mutation Resolvers

Defines all write operations (mutations) for the GraphQL API.
"""

import logging

import strawberry
from strawberry.types import Info

from blog_api.graphql.context import GraphQLContext
from blog_api.graphql.types.post import PostType, post_to_graphql

logger = logging.getLogger(__name__)


@strawberry.type
class Mutation:
    """
    GraphQL Mutation type containing all write operations.
    """

    @strawberry.mutation(description="Create a post for an existing user and attach categories to it")
    def create_post(
        self,
        info: Info[GraphQLContext, None],
        email: str,
        title: str,
        description: str,
        categories: list[str | None] | None = None,
    ) -> PostType:
        """
        Create a post authored by the user with `email`.

        One category is created per entry in `categories`, attached to the
        new post. The post and its categories are committed in a single
        transaction before this returns, so the returned post's
        `categories` field already lists all of them.

        Raises:
            UserNotFoundError: No user has this email; nothing is written
            ValidationError: A category name is null; nothing is written
        """
        logger.debug(f"createPost for {email} with categories {categories}")

        post = info.context.repository.create_post(
            email=email,
            title=title,
            description=description,
            categories=categories,
        )
        return post_to_graphql(post)
