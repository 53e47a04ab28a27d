"""Domain Types — verifies identity types and enum values.

Tests:
    - NewType wrappers are plain ints at runtime
    - Enum values match what clients send and the DB stores
"""

from linkup.core.domain_types import (
    CartItemType, DiscountType, EventStatus, EventType, OrganizerId, UserId,
)


def test_identity_types_wrap_int():
    assert OrganizerId(7) == 7
    assert UserId(7) == 7


def test_event_status_has_five_states():
    assert {s.value for s in EventStatus} == {
        "DRAFT", "PENDING", "PUBLISHED", "CANCELLED", "ENDED",
    }


def test_enums_compare_equal_to_their_values():
    assert EventType.ONLINE == "ONLINE"
    assert DiscountType.FIXED == "FIXED"
    assert CartItemType.TICKET_TYPES == "ticket_types"


def test_cart_item_types_are_lower_case():
    assert CartItemType("products") is CartItemType.PRODUCTS
