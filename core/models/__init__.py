# =============================================================================
# core/models/ - Data Models
# =============================================================================
# - product.py: Product table, request bodies, response envelopes
#
# These models define the "contract" between API and clients.
# =============================================================================

from .product import (
    FieldError,
    MessageResponse,
    NotFoundResponse,
    Product,
    ProductCreate,
    ProductListResponse,
    ProductRead,
    ProductResponse,
    ProductUpdate,
    ValidationErrorResponse,
)

__all__ = [
    "FieldError",
    "MessageResponse",
    "NotFoundResponse",
    "Product",
    "ProductCreate",
    "ProductListResponse",
    "ProductRead",
    "ProductResponse",
    "ProductUpdate",
    "ValidationErrorResponse",
]
