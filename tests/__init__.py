# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Feed API:
# - test_cors.py / test_auth.py: middleware behaviour
# - test_feed.py / test_image_service.py: image upload and storage
# - test_graphql_*.py: resolvers and error formatting
# - test_models.py / test_services.py / test_database.py: core layer
#
# No test needs a running MongoDB server.
#
# Run tests with: poetry run pytest
# =============================================================================
