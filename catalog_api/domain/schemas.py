# catalog_api/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer


class ProductType(str, Enum):
    BOOK = "book"
    FOOD = "food"
    GADGET = "gadget"
    OTHER = "other"


# Decimal is kept internally, clients get a plain JSON number
Cost = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ProductDetails(BaseModel):
    """
    Raw creation proposal, straight from the request body.
    Any field may be missing, of the wrong type or out of range,
    checks live in domain/validation.py.
    """

    name: Any = None
    type: Any = None
    inventory: Any = None
    cost: Any = None

    model_config = ConfigDict(extra="ignore")


class NewProduct(BaseModel):
    """Product fields after validation and coercion, before an id is assigned."""

    name: str
    type: ProductType
    inventory: int
    cost: Cost | None = None

    model_config = ConfigDict(frozen=True)


class Product(BaseModel):
    """Schema for a stored product (response)."""

    id: int = Field(..., gt=0)
    name: str
    type: ProductType
    inventory: int = Field(..., ge=0)
    cost: Cost | None = None

    model_config = ConfigDict(frozen=True, from_attributes=True)


class ProductId(BaseModel):
    id: int


class ErrorBody(BaseModel):
    """Schema for every error response."""

    status: int
    error: str
    path: str
    timestamp: datetime | None = None


class HealthOut(BaseModel):
    status: str
    products: int
