"""Cart Schemas — add/update cart lines and the cart view.

Invariants:
    - item_type "products" requires product_variant_id
    - item_type "ticket_types" requires ticket_type_id; quantity is forced to 1
    - quantity >= 1
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from linkup.core.domain_types import CartItemType
from linkup.schemas.common import ReadModel
from linkup.schemas.product import VariantRead
from linkup.schemas.ticketing import TicketTypeRead


class CartItemCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    item_type: CartItemType
    product_variant_id: int | None = None
    ticket_type_id: int | None = None
    quantity: int = Field(1, ge=1)

    @model_validator(mode="after")
    def validate_item_reference(self):
        if self.item_type == CartItemType.PRODUCTS.value:
            if self.product_variant_id is None:
                raise ValueError("products item requires product_variant_id")
        elif self.ticket_type_id is None:
            raise ValueError("ticket_types item requires ticket_type_id")
        else:
            self.quantity = 1
        return self


class CartItemUpdate(BaseModel):
    quantity: int = Field(ge=1)


class CartItemRead(ReadModel):
    id: int
    cart_id: int
    item_type: str
    product_variant_id: int | None
    ticket_type_id: int | None
    quantity: int
    added_at: datetime


class CartLineRead(CartItemRead):
    product_variant: VariantRead | None = None
    ticket_type: TicketTypeRead | None = None
    unit_price: Decimal
    line_total: Decimal


class CartSummaryRead(BaseModel):
    subtotal: Decimal
    discount: Decimal
    total: Decimal
    coupon_code: str | None = None


class CartRead(BaseModel):
    id: int | None
    user_id: int
    items: list[CartLineRead]
    summary: CartSummaryRead
