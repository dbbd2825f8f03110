# =============================================================================
# app/graphql/errors.py - GraphQL Error Formatting
# =============================================================================
# Errors raised from resolvers reach the client as
#
#   {"message": ..., "status": <status_code or 500>, "data": <error data>}
#
# Errors that did not come from a resolver exception (syntax errors, unknown
# fields, bad variables) keep the standard GraphQL shape.
# =============================================================================

from typing import Any

from graphql import GraphQLError

DEFAULT_MESSAGE = "An error occurred."


def format_graphql_error(error: GraphQLError) -> dict[str, Any]:
    """Reshape one GraphQL error for the response."""
    original = error.original_error
    if original is None:
        return dict(error.formatted)

    return {
        "message": error.message or DEFAULT_MESSAGE,
        "status": getattr(original, "status_code", None) or 500,
        "data": getattr(original, "data", None),
    }
