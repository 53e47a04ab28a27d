"""Ticketing Rules — write-time checks for ticket types and coupons.

Invariants:
    - quantity_total never drops below quantity_sold
    - sale_end, when set, is not before sale_start
    - PERCENTAGE coupons discount at most 100%; every discount value is > 0
    - valid_until, when set, is not before valid_from

Design Decisions:
    - Called with the merged (stored + incoming) values, so partial updates
      are checked against the final row, not just the request body
"""

from datetime import datetime
from decimal import Decimal

from linkup.core.domain_types import DiscountType
from linkup.core.errors import InvalidRequestError
from linkup.core.timekeeping import as_utc

MAX_PERCENTAGE = Decimal("100")


def check_capacity(quantity_total: int, quantity_sold: int) -> None:
    if quantity_total < quantity_sold:
        raise InvalidRequestError(
            f"quantity_total ({quantity_total}) cannot be less than "
            f"tickets already sold ({quantity_sold})",
            "quantity_total",
        )


def check_window(
    start: datetime | None, end: datetime | None, end_field: str,
) -> None:
    if start is not None and end is not None and as_utc(end) < as_utc(start):
        raise InvalidRequestError(
            f"{end_field} must not be before its start", end_field,
        )


def check_coupon_terms(
    discount_type: str,
    discount_value: Decimal,
    valid_from: datetime | None,
    valid_until: datetime | None,
) -> None:
    if Decimal(discount_value) <= 0:
        raise InvalidRequestError("discount_value must be positive", "discount_value")
    if (
        discount_type == DiscountType.PERCENTAGE.value
        and Decimal(discount_value) > MAX_PERCENTAGE
    ):
        raise InvalidRequestError(
            "percentage discount cannot exceed 100", "discount_value",
        )
    check_window(valid_from, valid_until, "valid_until")
