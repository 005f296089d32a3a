# =============================================================================
# app/routers/products.py - Product CRUD Endpoints
# =============================================================================
# Binds each verb/path to its validation rules and handler:
#
#   GET    /api/products        list
#   GET    /api/products/{id}   get by id        (id rules)
#   POST   /api/products        create           (name + price rules)
#   PUT    /api/products/{id}   full update      (id + name + price + availability rules)
#   PATCH  /api/products/{id}   flip availability (id rules)
#   DELETE /api/products/{id}   delete           (id rules)
#
# Validation failures never reach the handler; they raise
# ValidationFailedError, rendered as 400 by app.exceptions.
# =============================================================================

import json
from typing import Annotated, Any

from fastapi import APIRouter, Path, Request

from app.dependencies import ProductServiceDep
from app.exceptions import InvalidJsonBodyError, ProductNotFoundError, ValidationFailedError
from core.models.product import (
    MessageResponse,
    NotFoundResponse,
    ProductCreate,
    ProductListResponse,
    ProductRead,
    ProductResponse,
    ProductUpdate,
    ValidationErrorResponse,
)
from core.validation import (
    CREATE_PRODUCT_RULES,
    ID_RULES,
    UPDATE_PRODUCT_RULES,
    RequestData,
    Rule,
    validate,
)

router = APIRouter()

ProductIdPath = Annotated[str, Path(description="The product ID (integer)", examples=["1"])]

BAD_REQUEST = {400: {"model": ValidationErrorResponse, "description": "Bad request - Invalid input"}}
NOT_FOUND = {404: {"model": NotFoundResponse, "description": "Product not found"}}


def _json_body(model: type) -> dict[str, Any]:
    """OpenAPI requestBody for a route that reads its body by hand."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


# =============================================================================
# Request Helpers
# =============================================================================

async def read_body(request: Request) -> dict[str, Any]:
    """
    Parse the JSON body.

    An empty body, or JSON that is not an object, counts as {}.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        # Covers JSONDecodeError, UnicodeDecodeError and oversized integer literals
        raise InvalidJsonBodyError()
    return payload if isinstance(payload, dict) else {}


def check(rules: tuple[Rule, ...], data: RequestData) -> None:
    """Run the route's rules; raise if any of them failed."""
    errors = validate(rules, data)
    if errors:
        raise ValidationFailedError(errors)


def to_product_id(product_id: str) -> int:
    """Integer id from a path segment that already passed ID_RULES."""
    try:
        return int(product_id)
    except ValueError:
        # Longer than the interpreter's integer digit limit; no row has it
        raise ProductNotFoundError(product_id)


# =============================================================================
# Endpoints
# =============================================================================

@router.get(
    "",
    response_model=ProductListResponse,
    summary="Get a list of products",
)
async def get_products(service: ProductServiceDep):
    """Return every product, ordered by ID."""
    products = await service.list_products()
    return ProductListResponse(data=[ProductRead.model_validate(p) for p in products])


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get a product by ID",
    responses={**BAD_REQUEST, **NOT_FOUND},
)
async def get_product_by_id(product_id: ProductIdPath, service: ProductServiceDep):
    """Return a product by ID."""
    check(ID_RULES, RequestData(params={"id": product_id}))

    product = await service.get_product(to_product_id(product_id))
    return ProductResponse(data=ProductRead.model_validate(product))


@router.post(
    "",
    status_code=201,
    response_model=ProductResponse,
    summary="Create a new product",
    responses={201: {"description": "Product created successfully"}, **BAD_REQUEST},
    openapi_extra=_json_body(ProductCreate),
)
async def create_product(request: Request, service: ProductServiceDep):
    """
    Create a new product.

    Requires name and a price greater than 0. Availability starts true.
    """
    body = await read_body(request)
    check(CREATE_PRODUCT_RULES, RequestData(body=body))

    product = await service.create_product(body)
    return ProductResponse(data=ProductRead.model_validate(product))


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Update a product by ID",
    responses={200: {"description": "Product updated successfully"}, **BAD_REQUEST, **NOT_FOUND},
    openapi_extra=_json_body(ProductUpdate),
)
async def update_product(product_id: ProductIdPath, request: Request, service: ProductServiceDep):
    """Replace name, price and availability of a product."""
    body = await read_body(request)
    check(UPDATE_PRODUCT_RULES, RequestData(params={"id": product_id}, body=body))

    product = await service.update_product(to_product_id(product_id), body)
    return ProductResponse(data=ProductRead.model_validate(product))


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Update availability of a product by ID",
    responses={200: {"description": "Product availability updated successfully"}, **BAD_REQUEST, **NOT_FOUND},
)
async def update_availability(product_id: ProductIdPath, service: ProductServiceDep):
    """Flip the availability of a product. No body needed."""
    check(ID_RULES, RequestData(params={"id": product_id}))

    product = await service.toggle_availability(to_product_id(product_id))
    return ProductResponse(data=ProductRead.model_validate(product))


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    summary="Delete a product by ID",
    responses={200: {"description": "Product deleted successfully"}, **BAD_REQUEST, **NOT_FOUND},
)
async def delete_product(product_id: ProductIdPath, service: ProductServiceDep):
    """Delete a product permanently."""
    check(ID_RULES, RequestData(params={"id": product_id}))

    message = await service.delete_product(to_product_id(product_id))
    return MessageResponse(data=message)
