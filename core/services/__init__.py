# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .product_service import DELETED_MESSAGE, ProductService

__all__ = [
    "DELETED_MESSAGE",
    "ProductService",
]
