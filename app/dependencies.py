# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# The AppContext is built once by create_app() and kept on app.state;
# these dependencies hand its pieces to route handlers.
# =============================================================================

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine

from app.config import Settings
from core.services.product_service import ProductService
from lib.store import ProductStore


@dataclass
class AppContext:
    """
    Everything a running application owns.

    engine is None when the store does not sit on a database
    (for example the in-memory store).
    """
    settings: Settings
    store: ProductStore
    engine: AsyncEngine | None = None


def get_context(request: Request) -> AppContext:
    """Return the context of the application serving this request."""
    return request.app.state.context


def get_product_service(
    context: Annotated[AppContext, Depends(get_context)],
) -> ProductService:
    """Product handlers bound to the application's store."""
    return ProductService(context.store)


# Type aliases for dependency injection
ContextDep = Annotated[AppContext, Depends(get_context)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
