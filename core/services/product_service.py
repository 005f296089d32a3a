# =============================================================================
# core/services/product_service.py - Product Handlers
# =============================================================================
# One coroutine per API operation. Each receives already-validated input,
# calls the store at most once for a mutation, and returns the value placed
# under "data" in the response. Missing products raise ProductNotFoundError.
# =============================================================================

import logging
import math
from typing import Any

from app.exceptions import ProductNotFoundError, ValidationFailedError
from core.models.product import FieldError, Product
from core.validation import to_bool, to_number
from lib.store import ProductStore

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Product deleted successfully"


def to_price(value: Any) -> float:
    """
    Float price from a validated body value.

    Integers and digit strings too large for a float would become
    infinity; those are rejected instead of stored.
    """
    price = to_number(value)
    if not math.isfinite(price):
        raise ValidationFailedError([
            FieldError(value=None, msg="Price must be a number", path="price", location="body"),
        ])
    return price


class ProductService:
    """
    Request handlers for products.

    Stateless apart from the store it is given; a new instance per request
    is as good as a shared one.
    """

    def __init__(self, store: ProductStore):
        self.store = store

    async def list_products(self) -> list[Product]:
        """All products ordered by id ascending."""
        return await self.store.find_all()

    async def get_product(self, product_id: int) -> Product:
        """
        Get a product by ID.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        product = await self.store.find_by_pk(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def create_product(self, body: dict[str, Any]) -> Product:
        """
        Create a product from a validated body.

        Only name and price are taken; availability always starts true.
        """
        product = await self.store.create({
            "name": str(body["name"]),
            "price": to_price(body["price"]),
            "availability": True,
        })
        logger.info(f"Created product: {product.id}")
        return product

    async def update_product(self, product_id: int, body: dict[str, Any]) -> Product:
        """Replace name, price and availability of an existing product."""
        product = await self.get_product(product_id)

        product.name = str(body["name"])
        product.price = to_price(body["price"])
        product.availability = to_bool(body["availability"])

        product = await self.store.save(product)
        logger.info(f"Updated product: {product.id}")
        return product

    async def toggle_availability(self, product_id: int) -> Product:
        """Flip availability of an existing product."""
        product = await self.get_product(product_id)

        product.availability = not product.availability

        product = await self.store.save(product)
        logger.info(f"Product {product.id} availability -> {product.availability}")
        return product

    async def delete_product(self, product_id: int) -> str:
        """Delete an existing product permanently."""
        product = await self.get_product(product_id)
        await self.store.destroy(product)
        logger.info(f"Deleted product: {product_id}")
        return DELETED_MESSAGE
