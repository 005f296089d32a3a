# =============================================================================
# lib/store.py - Product Store
# =============================================================================
# The persistence boundary for products. Handlers only ever call these five
# primitives, so the backend can change without touching them:
#
#   find_all()          -> list[Product]   ordered by id
#   find_by_pk(id)      -> Product | None
#   create(fields)      -> Product         id assigned by the store
#   save(product)       -> Product         persists mutated fields
#   destroy(product)    -> None
#
# Two implementations:
# - SqlProductStore: SQLModel/SQLAlchemy async sessions, one per call
# - InMemoryProductStore: dict-backed, for tests and throwaway runs
# =============================================================================

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import select

from app.exceptions import ProductNotFoundError
from core.models.product import Product

logger = logging.getLogger(__name__)

# Primary keys are signed 64-bit integers on every supported backend
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class ProductStore(ABC):
    """Persistence primitives for Product."""

    @abstractmethod
    async def find_all(self) -> list[Product]:
        """Return every product, ordered by id ascending."""

    @abstractmethod
    async def find_by_pk(self, product_id: int) -> Product | None:
        """Return the product with this id, or None."""

    @abstractmethod
    async def create(self, fields: dict[str, Any]) -> Product:
        """Insert a product and return it with its generated id."""

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """
        Persist the current field values of an existing product.

        Raises:
            ProductNotFoundError: If the row was deleted in the meantime
        """

    @abstractmethod
    async def destroy(self, product: Product) -> None:
        """Remove the product permanently."""


# =============================================================================
# SQL Store
# =============================================================================

class SqlProductStore(ProductStore):
    """
    Store backed by a relational table through SQLModel.

    Each primitive opens its own session and commits before returning.
    Products handed out are detached; save() and destroy() look the row up
    again and never re-insert one that is gone.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def find_all(self) -> list[Product]:
        async with self._session_factory() as session:
            statement = select(Product).order_by(Product.id)
            results = await session.execute(statement)
            return list(results.scalars().all())

    async def find_by_pk(self, product_id: int) -> Product | None:
        if not MIN_ID <= product_id <= MAX_ID:
            return None
        async with self._session_factory() as session:
            return await session.get(Product, product_id)

    async def create(self, fields: dict[str, Any]) -> Product:
        product = Product(**fields)
        async with self._session_factory() as session:
            session.add(product)
            await session.commit()
            await session.refresh(product)
        logger.debug(f"Inserted product row {product.id}")
        return product

    async def save(self, product: Product) -> Product:
        async with self._session_factory() as session:
            row = await session.get(Product, product.id)
            if row is None:
                raise ProductNotFoundError(product.id)
            row.name = product.name
            row.price = product.price
            row.availability = product.availability
            await session.commit()
            await session.refresh(row)
            return row

    async def destroy(self, product: Product) -> None:
        async with self._session_factory() as session:
            row = await session.get(Product, product.id)
            if row is not None:
                await session.delete(row)
                await session.commit()


# =============================================================================
# In-Memory Store
# =============================================================================

class InMemoryProductStore(ProductStore):
    """
    Store backed by a dict keyed by id.

    Ids come from a counter that never goes backwards, so a deleted id is
    never reused. Rows are copied in and out; callers never hold the
    stored object itself.
    """

    def __init__(self):
        self._rows: dict[int, Product] = {}
        self._next_id = 1

    @staticmethod
    def _copy(product: Product) -> Product:
        return Product(**product.to_fields())

    async def find_all(self) -> list[Product]:
        return [self._copy(self._rows[key]) for key in sorted(self._rows)]

    async def find_by_pk(self, product_id: int) -> Product | None:
        row = self._rows.get(product_id)
        return self._copy(row) if row is not None else None

    async def create(self, fields: dict[str, Any]) -> Product:
        values = {"availability": True, **fields, "id": self._next_id}
        self._next_id += 1
        row = Product(**values)
        self._rows[row.id] = row
        return self._copy(row)

    async def save(self, product: Product) -> Product:
        if product.id not in self._rows:
            raise ProductNotFoundError(product.id)
        self._rows[product.id] = self._copy(product)
        return self._copy(product)

    async def destroy(self, product: Product) -> None:
        self._rows.pop(product.id, None)
