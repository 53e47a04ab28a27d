"""Error Hierarchy — status codes and the REST error envelope."""

import pytest

from linkup.core.errors import (
    AlreadyCheckedInError,
    AuthenticationError,
    CouponNotApplicableError,
    DatabaseError,
    DuplicateResourceError,
    InsufficientStockError,
    InvalidRequestError,
    LinkUpError,
    ResourceNotFoundError,
    TicketAlreadyInCartError,
    TicketUnavailableError,
)


@pytest.mark.parametrize("error, status, code", [
    (InvalidRequestError("bad", "title"), 400, "VALIDATION_ERROR"),
    (AuthenticationError(), 401, "INVALID_CREDENTIALS"),
    (CouponNotApplicableError("SAVE", "expired"), 400, "COUPON_NOT_APPLICABLE"),
    (ResourceNotFoundError("Event", 3), 404, "RESOURCE_NOT_FOUND"),
    (DuplicateResourceError("Coupon", "code", "SAVE"), 409, "DUPLICATE_RESOURCE"),
    (InsufficientStockError(1, 2), 409, "INSUFFICIENT_STOCK"),
    (TicketAlreadyInCartError(1), 409, "TICKET_ALREADY_IN_CART"),
    (TicketUnavailableError("sold out"), 409, "TICKET_UNAVAILABLE"),
    (AlreadyCheckedInError(5), 409, "ALREADY_CHECKED_IN"),
    (DatabaseError("down", "execute"), 503, "DATABASE_ERROR"),
])
def test_status_and_code(error, status, code):
    assert isinstance(error, LinkUpError)
    assert error.http_status == status
    assert error.code == code


def test_not_found_response_envelope():
    body = ResourceNotFoundError("Event", 42).to_response()
    assert body["status"] == "error"
    assert body["message"] == "Event '42' not found"
    assert body["error"]["category"] == "resource_not_found"
    assert body["error"]["context"] == {"resource_type": "Event", "resource_id": "42"}
    assert "timestamp" in body["error"]


def test_authentication_message_does_not_reveal_cause():
    assert AuthenticationError().message == "Invalid email or password"
