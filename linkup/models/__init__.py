"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Event is the aggregate root for ticketing; Product for the shop; Cart per user

Design Decisions:
    - One file per aggregate for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from linkup.models.user import User, UserProfile  # noqa: F401
from linkup.models.event import Event  # noqa: F401
from linkup.models.ticket_type import TicketType  # noqa: F401
from linkup.models.guest import Guest  # noqa: F401
from linkup.models.coupon import Coupon  # noqa: F401
from linkup.models.attachment import Attachment  # noqa: F401
from linkup.models.product import Product, ProductVariant  # noqa: F401
from linkup.models.cart import Cart, CartItem  # noqa: F401
