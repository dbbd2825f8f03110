# =============================================================================
# app/graphql/router.py - GraphQL HTTP Mount
# =============================================================================
# Strawberry's FastAPI router with the response errors reshaped by
# format_graphql_error. GraphiQL is served on GET when settings.GRAPHIQL is on.
# =============================================================================

from fastapi import Request
from strawberry.fastapi import GraphQLRouter
from strawberry.http import GraphQLHTTPResponse
from strawberry.types import ExecutionResult

from app.config import settings
from app.graphql.errors import format_graphql_error
from app.graphql.schema import schema


class FeedGraphQLRouter(GraphQLRouter):
    """GraphQL router applying the API's error format."""

    async def process_result(
        self, request: Request, result: ExecutionResult
    ) -> GraphQLHTTPResponse:
        data: GraphQLHTTPResponse = {"data": result.data}

        if result.errors:
            data["errors"] = [format_graphql_error(err) for err in result.errors]

        return data


def create_graphql_router() -> FeedGraphQLRouter:
    """Build the router mounted at /graphql."""
    return FeedGraphQLRouter(
        schema,
        graphql_ide="graphiql" if settings.GRAPHIQL else None,
    )
