"""Pricing — cart line totals and coupon discounts.

Invariants:
    - All money is Decimal, quantized to cents with ROUND_HALF_UP
    - A discount never exceeds the amount it applies to (total >= 0)
    - Event coupons only discount ticket lines of their own event

Design Decisions:
    - CouponLike Protocol: accepts the ORM Coupon or any test double with the
      same attributes, without importing models into core
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Protocol

from linkup.core.domain_types import CENT, DiscountType
from linkup.core.errors import CouponNotApplicableError
from linkup.core.timekeeping import as_utc, utc_now

_HUNDRED = Decimal("100")


class CouponLike(Protocol):
    """Structural contract for coupon objects passed to pricing."""
    code: str
    event_id: int
    discount_type: str
    discount_value: Decimal
    usage_limit: int | None
    used_count: int
    valid_from: datetime | None
    valid_until: datetime | None
    is_active: bool


@dataclass(frozen=True)
class CartLine:
    """One priced line; event_id is set only for ticket lines."""
    unit_price: Decimal
    quantity: int
    event_id: int | None = None


@dataclass(frozen=True)
class CartSummary:
    subtotal: Decimal
    discount: Decimal
    total: Decimal

    def to_dict(self) -> dict:
        return {
            "subtotal": self.subtotal,
            "discount": self.discount,
            "total": self.total,
        }


def to_cents(amount: Decimal) -> Decimal:
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def variant_unit_price(base_price: Decimal, price_offset: Decimal) -> Decimal:
    return to_cents(Decimal(base_price) + Decimal(price_offset or 0))


def line_total(unit_price: Decimal, quantity: int) -> Decimal:
    return to_cents(Decimal(unit_price) * quantity)


def check_coupon_usable(coupon: CouponLike, now: datetime) -> None:
    """Raise CouponNotApplicableError if the coupon cannot be used at `now`."""
    if not coupon.is_active:
        raise CouponNotApplicableError(coupon.code, "inactive")
    now = as_utc(now)
    if coupon.valid_from is not None and now < as_utc(coupon.valid_from):
        raise CouponNotApplicableError(coupon.code, "not yet valid")
    if coupon.valid_until is not None and now > as_utc(coupon.valid_until):
        raise CouponNotApplicableError(coupon.code, "expired")
    if coupon.usage_limit is not None and coupon.used_count >= coupon.usage_limit:
        raise CouponNotApplicableError(coupon.code, "usage limit reached")


def coupon_discount(
    coupon: CouponLike, eligible_amount: Decimal, now: datetime,
) -> Decimal:
    """Discount the coupon grants on `eligible_amount`, capped at that amount."""
    check_coupon_usable(coupon, now)
    eligible_amount = to_cents(eligible_amount)
    value = Decimal(coupon.discount_value)
    if coupon.discount_type == DiscountType.PERCENTAGE.value:
        percent = min(value, _HUNDRED)
        discount = eligible_amount * percent / _HUNDRED
    else:
        discount = value
    return min(to_cents(discount), eligible_amount)


def summarize_cart(
    lines: list[CartLine],
    coupon: CouponLike | None = None,
    now: datetime | None = None,
) -> CartSummary:
    """Subtotal, discount and total for a cart.

    The coupon (if any) applies to ticket lines whose event matches
    coupon.event_id. A coupon with nothing eligible is rejected rather than
    silently yielding zero.
    """
    subtotal = to_cents(
        sum(
            (line_total(line.unit_price, line.quantity) for line in lines),
            Decimal("0"),
        ),
    )
    discount = Decimal("0.00")
    if coupon is not None:
        eligible = sum(
            (
                line_total(line.unit_price, line.quantity)
                for line in lines if line.event_id == coupon.event_id
            ),
            Decimal("0"),
        )
        if eligible <= 0:
            raise CouponNotApplicableError(
                coupon.code, "no tickets for this event in cart",
            )
        discount = coupon_discount(coupon, eligible, now or utc_now())
    return CartSummary(
        subtotal=subtotal, discount=discount, total=subtotal - discount,
    )
