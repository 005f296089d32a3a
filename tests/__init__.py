# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Products API:
# - test_validation.py: Field rules and rule sets
# - test_models.py: Product table model and response schemas
# - test_store.py: Store contract on SQL and in-memory backends
# - test_product_service.py: Request handlers
# - test_products_api.py: HTTP endpoints end to end
# - test_app.py: Settings, CORS, docs, health, error handling
#
# Run tests with: pytest
# =============================================================================
