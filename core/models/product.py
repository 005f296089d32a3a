# =============================================================================
# core/models/product.py - Product Table and Schemas
# =============================================================================
# These models define the storage row and the API contract for products:
# - Product: SQLModel table mapped to "products"
# - ProductCreate / ProductUpdate: request body shapes (documentation only,
#   the validation layer checks raw bodies itself)
# - ProductRead: what clients receive inside the "data" envelope
# - ProductResponse / ProductListResponse / MessageResponse: envelopes
# - FieldError / ValidationErrorResponse / NotFoundResponse: error envelopes
# =============================================================================

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field as PydanticField
from sqlalchemy import Column, Boolean, true
from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    A product row.

    id is assigned by the store on creation and never changes.
    price > 0 is guaranteed by the validation layer, not by the table.
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    price: float = Field(nullable=False)
    availability: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, default=True, server_default=true()),
    )

    def to_fields(self) -> dict[str, Any]:
        """Plain dict of the stored columns."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "availability": self.availability,
        }


# =============================================================================
# Request Schemas
# =============================================================================

class ProductCreate(BaseModel):
    """Body accepted by POST /api/products."""
    name: str = PydanticField(..., examples=["Monitor Curvo"], description="The product name")
    price: float = PydanticField(..., gt=0, examples=[200], description="The product price")


class ProductUpdate(BaseModel):
    """Body accepted by PUT /api/products/{id}. All fields are required."""
    name: str = PydanticField(..., examples=["Monitor Curvo"], description="The product name")
    price: float = PydanticField(..., gt=0, examples=[200], description="The product price")
    availability: bool = PydanticField(..., examples=[True], description="The product availability")


# =============================================================================
# Response Schemas
# =============================================================================

class ProductRead(BaseModel):
    """Product as returned to clients."""
    id: int = PydanticField(..., examples=[1], description="The product ID")
    name: str = PydanticField(..., examples=["Monitor Curvo"], description="The product name")
    price: float = PydanticField(..., examples=[200], description="The product price")
    availability: bool = PydanticField(..., examples=[True], description="The product availability")

    model_config = ConfigDict(from_attributes=True)


class ProductResponse(BaseModel):
    data: ProductRead


class ProductListResponse(BaseModel):
    data: list[ProductRead] = PydanticField(default_factory=list)


class MessageResponse(BaseModel):
    data: str = PydanticField(..., examples=["Product deleted successfully"])


class FieldError(BaseModel):
    """
    One failed validation rule.

    msg is the contractual part; the rest locates the offending input.
    """
    type: Literal["field"] = "field"
    value: Any = None
    msg: str
    path: str
    location: Literal["params", "body"]


class ValidationErrorResponse(BaseModel):
    errors: list[FieldError]


class NotFoundResponse(BaseModel):
    # A bare string here, unlike the list carried by validation failures.
    errors: str = PydanticField(..., examples=["Product not found"])
