"""Ticketing Schemas — ticket types, guests, coupons and attachments of an event.

Invariants:
    - Decimal fields are Decimal with at most 2 decimal places
    - Coupon codes are stripped and upper-cased
    - Guest email is stripped and lower-cased

Design Decisions:
    - Cross-field rules that need stored values (coupon terms, quantity_total
      vs quantity_sold) live in core/ and run in the service with merged values
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from linkup.core.domain_types import DiscountType
from linkup.schemas.common import PartialUpdate, ReadModel


# --- Ticket types -------------------------------------------------------------

class TicketTypeCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    quantity_total: int = Field(ge=0)
    sale_start: datetime | None = None
    sale_end: datetime | None = None


class TicketTypeUpdate(PartialUpdate):
    non_nullable = ("name", "price", "quantity_total")

    name: str | None = Field(None, min_length=1, max_length=100)
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    quantity_total: int | None = Field(None, ge=0)
    sale_start: datetime | None = None
    sale_end: datetime | None = None


class TicketTypeRead(ReadModel):
    id: int
    event_id: int
    name: str
    price: Decimal
    quantity_total: int
    quantity_sold: int
    sale_start: datetime | None
    sale_end: datetime | None
    created_at: datetime


# --- Guests -------------------------------------------------------------------

def _normalize_guest_email(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip().lower()
    if "@" not in v:
        raise ValueError("email must contain '@'")
    return v


class GuestCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255)
    phone: str | None = Field(None, max_length=30)
    ticket_type_id: int | None = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        return _normalize_guest_email(v)


class GuestUpdate(PartialUpdate):
    non_nullable = ("name", "email")

    name: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, min_length=3, max_length=255)
    phone: str | None = Field(None, max_length=30)
    ticket_type_id: int | None = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        return _normalize_guest_email(v)


class GuestRead(ReadModel):
    id: int
    event_id: int
    ticket_type_id: int | None
    name: str
    email: str
    phone: str | None
    checked_in: bool
    checked_in_at: datetime | None
    created_at: datetime


# --- Coupons ------------------------------------------------------------------

def _normalize_code(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip().upper()
    if not v:
        raise ValueError("code cannot be empty or whitespace")
    return v


class CouponCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    code: str = Field(min_length=1, max_length=50)
    discount_type: DiscountType = DiscountType.PERCENTAGE
    discount_value: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    usage_limit: int | None = Field(None, ge=1)
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    is_active: bool = True

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str | None) -> str | None:
        return _normalize_code(v)


class CouponUpdate(PartialUpdate):
    non_nullable = ("code", "discount_type", "discount_value", "is_active")

    code: str | None = Field(None, min_length=1, max_length=50)
    discount_type: DiscountType | None = None
    discount_value: Decimal | None = Field(None, gt=0, max_digits=10, decimal_places=2)
    usage_limit: int | None = Field(None, ge=1)
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    is_active: bool | None = None

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str | None) -> str | None:
        return _normalize_code(v)


class CouponRead(ReadModel):
    id: int
    event_id: int
    code: str
    discount_type: str
    discount_value: Decimal
    usage_limit: int | None
    used_count: int
    valid_from: datetime | None
    valid_until: datetime | None
    is_active: bool
    created_at: datetime


# --- Attachments --------------------------------------------------------------

class AttachmentCreate(BaseModel):
    file_name: str = Field(min_length=1, max_length=255)
    file_url: str = Field(min_length=1, max_length=1000)
    mime_type: str | None = Field(None, max_length=100)
    size_bytes: int | None = Field(None, ge=0)


class AttachmentRead(ReadModel):
    id: int
    event_id: int
    file_name: str
    file_url: str
    mime_type: str | None
    size_bytes: int | None
    created_at: datetime
