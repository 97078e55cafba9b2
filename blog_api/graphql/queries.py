"""
GraphQL Query Resolvers

Defines all read operations (queries) for the GraphQL API.
Each resolver reads through the BlogRepository on the request context.

A missing entity is never an error here: lookups that match nothing
return an empty list.
"""

import strawberry
from strawberry.types import Info

from blog_api.graphql.context import GraphQLContext
from blog_api.graphql.types.category import CategoryType, category_to_graphql
from blog_api.graphql.types.post import PostType, post_to_graphql
from blog_api.graphql.types.user import UserType, user_to_graphql


@strawberry.type
class Query:
    """
    GraphQL Query type containing all read operations.

    All resolvers receive an `info` parameter that carries the
    GraphQL context with the request's repository.
    """

    @strawberry.field(description="Get all users, or the user with the given email")
    def see_user(
        self,
        info: Info[GraphQLContext, None],
        email: str | None = strawberry.UNSET,
    ) -> list[UserType]:
        """
        Look users up by email.

        Args:
            email: Exact email to match; omit to list every user.
                An explicit null matches nobody.

        Returns:
            Every user when email is omitted; otherwise a list holding the
            matching user, or an empty list when nobody has that email
        """
        repository = info.context.repository

        if email is strawberry.UNSET:
            return [user_to_graphql(u) for u in repository.list_users()]

        if email is None:
            return []

        user = repository.get_user_by_email(email)
        if user is None:
            return []
        return [user_to_graphql(user)]

    @strawberry.field(description="Get every post written by the user with the given email")
    def see_post(
        self,
        info: Info[GraphQLContext, None],
        email: str,
    ) -> list[PostType]:
        """
        Get the posts of one author.

        An unknown email yields an empty list.
        """
        posts = info.context.repository.list_posts_by_author_email(email)
        return [post_to_graphql(p) for p in posts]

    @strawberry.field(description="Get all categories, or those with the given name")
    def see_categories(
        self,
        info: Info[GraphQLContext, None],
        name: str | None = None,
    ) -> list[CategoryType]:
        """
        Get categories, optionally filtered by exact name.

        Category names are not unique, so one name can match categories
        attached to different posts.
        """
        categories = info.context.repository.list_categories(name)
        return [category_to_graphql(c) for c in categories]
