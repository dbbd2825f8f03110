# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the API:
# - models/: Beanie documents and Pydantic input schemas
# - services/: user, post and image operations
# - database.py: MongoDB client and Beanie initialization
#
# Code in this package does not import from FastAPI or Strawberry directly.
# It shares settings (app.config) and the error classes (app.exceptions)
# with the web layer, so services raise the errors clients receive.
# =============================================================================
