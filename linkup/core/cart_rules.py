"""Cart Rules — stock, ticket availability and one-ticket-per-event checks.

Invariants:
    - A product line never holds more units than the variant's stock
    - A ticket line is only added while its event is PUBLISHED and the ticket
      type is on sale and not sold out
    - A cart holds at most one ticket line per event
    - Ticket lines always have quantity 1

Design Decisions:
    - Functions take primitives (counts, ids, datetimes) rather than ORM rows,
      so they run without a session
"""

from collections.abc import Iterable
from datetime import datetime

from linkup.core.domain_types import EventStatus
from linkup.core.errors import (
    BusinessRuleError,
    InsufficientStockError,
    TicketAlreadyInCartError,
    TicketUnavailableError,
)
from linkup.core.timekeeping import as_utc

TICKET_LINE_QUANTITY = 1


def check_stock(available: int, existing: int, requested: int) -> int:
    """Return the new line quantity, or raise if stock cannot cover it."""
    new_total = existing + requested
    if new_total > available:
        raise InsufficientStockError(available=available, requested=new_total)
    return new_total


def check_ticket_available(
    quantity_total: int,
    quantity_sold: int,
    sale_start: datetime | None,
    sale_end: datetime | None,
    now: datetime,
) -> None:
    """Raise TicketUnavailableError when the ticket type cannot be bought at `now`."""
    if quantity_sold >= quantity_total:
        raise TicketUnavailableError("sold out")
    now = as_utc(now)
    if sale_start is not None and now < as_utc(sale_start):
        raise TicketUnavailableError("sale has not started")
    if sale_end is not None and now > as_utc(sale_end):
        raise TicketUnavailableError("sale has ended")


def check_event_on_sale(event_status: str) -> None:
    """Tickets are only sold for published events."""
    if event_status != EventStatus.PUBLISHED.value:
        raise TicketUnavailableError("event not on sale")


def check_one_ticket_per_event(
    event_ids_in_cart: Iterable[int], event_id: int,
) -> None:
    if event_id in set(event_ids_in_cart):
        raise TicketAlreadyInCartError(event_id)


def check_ticket_quantity(quantity: int) -> None:
    if quantity != TICKET_LINE_QUANTITY:
        raise BusinessRuleError(
            "Ticket lines are limited to a quantity of 1",
            "TICKET_QUANTITY_FIXED",
        )
