"""Pydantic schemas for product input and output.

Input schemas carry the field constraints; a submission that fails them
never reaches the service layer.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator
from pydantic_core import PydanticCustomError

from product_manager.models.product import INTEGER_MAX

MIN_PRICE = Decimal("0.01")
MAX_PRICE = Decimal("999999.99")


class ProductBase(BaseModel):
    """Business fields shared by create and update submissions."""

    name: str = Field(min_length=2, max_length=100, description="Product name")
    description: str = Field(
        min_length=10, max_length=500, description="Product description"
    )
    price: Decimal = Field(ge=MIN_PRICE, le=MAX_PRICE, description="Unit price")
    quantity: int = Field(ge=0, le=INTEGER_MAX, description="Units in stock")

    @field_validator("name", "description", mode="before")
    @classmethod
    def reject_blank(cls, value: Any) -> Any:
        """Treat empty or whitespace-only text as not supplied."""
        if isinstance(value, str) and not value.strip():
            raise PydanticCustomError("blank", "Field must not be blank")
        return value


class ProductCreate(ProductBase):
    """Request schema for creating a product. Any submitted id is ignored."""


class ProductUpdate(ProductBase):
    """Request schema for replacing a product's business fields."""

    id: int = Field(description="Product ID, must match the path ID")


class ProductResponse(BaseModel):
    """Response schema for a stored product."""

    id: int = Field(description="Product ID")
    name: str = Field(description="Product name")
    description: str = Field(description="Product description")
    price: Decimal = Field(description="Unit price")
    quantity: int = Field(description="Units in stock")

    model_config = {"from_attributes": True}

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)
