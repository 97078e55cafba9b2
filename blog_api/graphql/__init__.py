"""
GraphQL Package

This package provides the GraphQL API using Strawberry GraphQL.

Schema:
    type Query {
        seeUser(email: String): [User!]!
        seePost(email: String!): [Post!]!
        seeCategories(name: String): [Category!]!
    }

    type Mutation {
        createPost(email: String!, title: String!, description: String!,
                   categories: [String]): Post!
    }

Usage:
    The GraphQL endpoint is available at /graphql, with an in-browser IDE
    when GRAPHQL_IDE is set.

Example Query:
    query {
        seePost(email: "alice@example.com") {
            id
            title
            categories { name }
        }
    }
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from blog_api.config import get_settings
from blog_api.graphql.context import get_context
from blog_api.graphql.mutations import Mutation
from blog_api.graphql.queries import Query

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def create_graphql_router() -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Returns:
        GraphQLRouter configured with schema and context
    """
    settings = get_settings()
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide=settings.graphql_ide,
    )


__all__ = ["schema", "create_graphql_router"]
