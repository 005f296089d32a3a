# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Handlers and routers raise; the functions at the bottom of this module turn
# exceptions into JSON bodies.
#
# Response shapes:
#   400 -> {"errors": [{"msg": ..., ...}, ...]}   (list of field errors)
#   404 -> {"errors": "Product not found"}        (bare string)
#   500 -> {"errors": "Internal server error"}
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.models.product import FieldError

logger = logging.getLogger(__name__)


class ProductApiException(Exception):
    """
    Base exception for the products API.

    Carries the HTTP status code and the value placed under "errors".
    """

    def __init__(self, errors: Any, status_code: int = 500):
        super().__init__(errors if isinstance(errors, str) else "Request failed")
        self.errors = errors
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"errors": self.errors}


# =============================================================================
# Product Exceptions
# =============================================================================

class ProductNotFoundError(ProductApiException):
    """Raised when a product ID doesn't exist."""

    def __init__(self, product_id: int):
        super().__init__("Product not found", status_code=404)
        self.product_id = product_id


class ValidationFailedError(ProductApiException):
    """Raised when one or more validation rules fail."""

    def __init__(self, errors: list[FieldError]):
        super().__init__(errors, status_code=400)

    def to_dict(self) -> dict[str, Any]:
        return {"errors": [error.model_dump(mode="json") for error in self.errors]}


class InvalidJsonBodyError(ValidationFailedError):
    """Raised when the request body cannot be parsed as JSON."""

    def __init__(self):
        super().__init__([
            FieldError(msg="Body must be valid JSON", path="", location="body"),
        ])


# =============================================================================
# Exception Handlers
# =============================================================================

async def product_api_exception_handler(
    request: Request,
    exc: ProductApiException
) -> JSONResponse:
    """Render a ProductApiException with its own status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.errors}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Render framework-level validation errors in the 400 field-error shape.

    FastAPI reports locations as tuples like ("path", "id"); the first
    element is mapped to "params" or "body".
    """
    errors = []
    for error in exc.errors():
        loc = error.get("loc", ())
        location = "body" if loc and loc[0] == "body" else "params"
        errors.append(
            FieldError(
                value=error.get("input"),
                msg=error.get("msg", "Invalid value"),
                path=".".join(str(part) for part in loc[1:]),
                location=location,
            ).model_dump(mode="json")
        )
    return JSONResponse(status_code=400, content={"errors": errors})


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Log unexpected failures (usually the database) and answer 500."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"errors": "Internal server error"}
    )
