"""Cart Rules — stock, ticket availability, one ticket per event."""

from datetime import datetime, timedelta, timezone

import pytest

from linkup.core.cart_rules import (
    check_event_on_sale,
    check_one_ticket_per_event,
    check_stock,
    check_ticket_available,
    check_ticket_quantity,
)
from linkup.core.errors import (
    BusinessRuleError,
    InsufficientStockError,
    TicketAlreadyInCartError,
    TicketUnavailableError,
)

NOW = datetime(2027, 3, 1, 12, tzinfo=timezone.utc)


def test_stock_returns_accumulated_quantity():
    assert check_stock(available=5, existing=2, requested=3) == 5


def test_stock_reports_total_requested():
    with pytest.raises(InsufficientStockError) as exc_info:
        check_stock(available=5, existing=4, requested=2)
    assert exc_info.value.available == 5
    assert exc_info.value.requested == 6
    assert exc_info.value.http_status == 409


def test_ticket_on_sale_without_window():
    check_ticket_available(100, 0, None, None, NOW)


def test_sold_out_ticket_raises():
    with pytest.raises(TicketUnavailableError) as exc_info:
        check_ticket_available(100, 100, None, None, NOW)
    assert exc_info.value.reason == "sold out"


def test_ticket_before_sale_start_raises():
    with pytest.raises(TicketUnavailableError) as exc_info:
        check_ticket_available(10, 0, NOW + timedelta(days=1), None, NOW)
    assert exc_info.value.reason == "sale has not started"


def test_ticket_after_sale_end_raises():
    with pytest.raises(TicketUnavailableError) as exc_info:
        check_ticket_available(10, 0, None, NOW - timedelta(seconds=1), NOW)
    assert exc_info.value.reason == "sale has ended"


def test_naive_sale_window_treated_as_utc():
    start = (NOW - timedelta(hours=1)).replace(tzinfo=None)
    end = (NOW + timedelta(hours=1)).replace(tzinfo=None)
    check_ticket_available(10, 0, start, end, NOW)


def test_second_ticket_for_same_event_raises():
    check_one_ticket_per_event([1, 2], 3)
    with pytest.raises(TicketAlreadyInCartError):
        check_one_ticket_per_event([1, 2], 2)


def test_ticket_quantity_fixed_at_one():
    check_ticket_quantity(1)
    with pytest.raises(BusinessRuleError) as exc_info:
        check_ticket_quantity(2)
    assert exc_info.value.code == "TICKET_QUANTITY_FIXED"


def test_only_published_events_sell_tickets():
    check_event_on_sale("PUBLISHED")
    for status in ("DRAFT", "PENDING", "CANCELLED", "ENDED"):
        with pytest.raises(TicketUnavailableError) as exc_info:
            check_event_on_sale(status)
        assert exc_info.value.reason == "event not on sale"
