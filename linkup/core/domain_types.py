"""Domain Types — enums and identity types shared across the codebase.

Invariants:
    - All valid states encoded as Enums — no raw string matching
    - Enum values match the DB `status`/`type` columns exactly

Design Decisions:
    - str Enums: serialize to JSON and store in String columns without converters
    - Upper-case event/coupon values and lower-case cart item types mirror the
      values the web client already sends
"""

from decimal import Decimal
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

OrganizerId = NewType("OrganizerId", int)
UserId = NewType("UserId", int)


# ─── Value Constants ─────────────────────────────────────────────

CENT = Decimal("0.01")
COPY_SUFFIX = " - Copy"


# ─── Enums ───────────────────────────────────────────────────────

class EventStatus(str, Enum):
    """Event lifecycle states. New and copied events always start as DRAFT."""
    DRAFT = "DRAFT"
    PENDING = "PENDING"
    PUBLISHED = "PUBLISHED"
    CANCELLED = "CANCELLED"
    ENDED = "ENDED"


class EventType(str, Enum):
    """Where the event happens."""
    OFFLINE = "OFFLINE"
    ONLINE = "ONLINE"


class DiscountType(str, Enum):
    """Coupon discount kinds."""
    PERCENTAGE = "PERCENTAGE"
    FIXED = "FIXED"


class CartItemType(str, Enum):
    """What a cart line points at."""
    PRODUCTS = "products"
    TICKET_TYPES = "ticket_types"
