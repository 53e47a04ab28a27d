"""Product Schemas — products with nested variants.

Invariants:
    - ProductCreate.name non-empty, base_price > 0
    - Every variant has stock_quantity >= 0; price_offset defaults to 0
    - ProductUpdate.variants, when present, replaces the whole variant set
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from linkup.schemas.common import PartialUpdate, ReadModel


class VariantInput(BaseModel):
    option1_name: str | None = Field(None, max_length=50)
    option1_value: str | None = Field(None, max_length=50)
    option2_name: str | None = Field(None, max_length=50)
    option2_value: str | None = Field(None, max_length=50)
    sku: str | None = Field(None, max_length=100)
    stock_quantity: int = Field(ge=0)
    price_offset: Decimal = Field(Decimal("0"), max_digits=10, decimal_places=2)


class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    base_price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)
    variants: list[VariantInput]


class ProductUpdate(PartialUpdate):
    non_nullable = ("name", "base_price", "variants")

    name: str | None = Field(None, min_length=1, max_length=200)
    base_price: Decimal | None = Field(None, gt=0, max_digits=10, decimal_places=2)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)
    variants: list[VariantInput] | None = None


class VariantRead(ReadModel):
    id: int
    product_id: int
    option1_name: str | None
    option1_value: str | None
    option2_name: str | None
    option2_value: str | None
    sku: str | None
    stock_quantity: int
    price_offset: Decimal


class ProductRead(ReadModel):
    id: int
    name: str
    description: str | None
    base_price: Decimal
    image_url: str | None
    created_at: datetime
    updated_at: datetime
    variants: list[VariantRead] = []
