"""Ticketing Rules — capacity, sale windows and coupon terms."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from linkup.core.errors import InvalidRequestError
from linkup.core.ticketing_rules import check_capacity, check_coupon_terms, check_window

JAN = datetime(2027, 1, 1, tzinfo=timezone.utc)
FEB = datetime(2027, 2, 1, tzinfo=timezone.utc)


def test_capacity_equal_to_sold_is_allowed():
    check_capacity(10, 10)


def test_capacity_below_sold_raises():
    with pytest.raises(InvalidRequestError) as exc_info:
        check_capacity(9, 10)
    assert exc_info.value.field == "quantity_total"


def test_open_ended_window_is_allowed():
    check_window(JAN, None, "sale_end")
    check_window(None, JAN, "sale_end")


def test_inverted_window_names_end_field():
    with pytest.raises(InvalidRequestError) as exc_info:
        check_window(FEB, JAN, "valid_until")
    assert exc_info.value.field == "valid_until"


def test_full_percentage_is_allowed():
    check_coupon_terms("PERCENTAGE", Decimal("100"), None, None)


def test_percentage_over_100_raises():
    with pytest.raises(InvalidRequestError):
        check_coupon_terms("PERCENTAGE", Decimal("100.01"), None, None)


def test_fixed_amount_over_100_is_allowed():
    check_coupon_terms("FIXED", Decimal("250"), JAN, FEB)


@pytest.mark.parametrize("value", [Decimal("0"), Decimal("-5")])
def test_non_positive_discount_raises(value):
    with pytest.raises(InvalidRequestError):
        check_coupon_terms("FIXED", value, None, None)
