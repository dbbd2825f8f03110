# =============================================================================
# app/graphql/ - GraphQL API
# =============================================================================
# - schema.py: Query / Mutation resolvers and the Strawberry schema
# - types.py: object and input types
# - errors.py: error formatting callback
# - router.py: FastAPI mount with GraphiQL
# =============================================================================

from app.graphql.errors import format_graphql_error
from app.graphql.router import FeedGraphQLRouter, create_graphql_router
from app.graphql.schema import schema

__all__ = [
    "FeedGraphQLRouter",
    "create_graphql_router",
    "format_graphql_error",
    "schema",
]
