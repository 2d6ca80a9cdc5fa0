"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.printer import print_schema

from ..config import settings
from ..errors import SchemaValidationError
from ..logging import get_logger
from ..store import get_store
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Makes sure every type reference resolves, so the server fails fast instead
    of answering requests with a broken schema.

    Raises:
        SchemaValidationError: If the schema is invalid or introspection fails
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            raise SchemaValidationError("schema validation", [str(e) for e in errors])

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            raise SchemaValidationError("introspection", [str(e) for e in result.errors])

        logger.info("GraphQL schema validation successful")

    except SchemaValidationError as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def print_schema_sdl() -> str:
    """Render the schema as GraphQL SDL."""
    return print_schema(schema)


# Create the GraphQL router for FastAPI integration
def create_graphql_router(graphiql: bool | None = None) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    Args:
        graphiql: Serve the GraphiQL explorer on GET /graphql. Defaults to settings.graphiql.
    """
    if graphiql is None:
        graphiql = settings.graphiql

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "store": get_store(),
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
