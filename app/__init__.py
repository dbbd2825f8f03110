# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the web application:
# - main.py: App factory, middleware order, error handlers, startup
# - config.py: Environment variable loading and settings
# - middleware.py: CORS headers
# - auth/: Token issuing and the authentication middleware
# - routers/: REST endpoints (health, image upload)
# - graphql/: GraphQL schema, resolvers and mount
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================

__version__ = "1.0.0"
