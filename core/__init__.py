# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the product domain:
# - models/: SQLModel table and Pydantic request/response schemas
# - validation.py: Field rules and the sequential rule runner
# - services/: Request handlers that work through a ProductStore
# =============================================================================
