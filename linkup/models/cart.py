"""Cart ORM — one shopping cart per user holding product and ticket lines.

Invariants:
    - user_id is unique (a user has at most one cart)
    - item_type == "products" iff product_variant_id is set
    - item_type == "ticket_types" iff ticket_type_id is set, and quantity == 1
    - items are ordered newest first

Design Decisions:
    - user_id is not a FK: the shopper is the configured mock principal
    - Cart lines cascade with their cart, variant or ticket type (ON DELETE CASCADE)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from linkup.db.base import Base


class Cart(Base):
    __tablename__ = "carts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    items: Mapped[list["CartItem"]] = relationship(
        "CartItem", back_populates="cart",
        cascade="all, delete-orphan", passive_deletes=True,
        order_by=lambda: [CartItem.added_at.desc(), CartItem.id.desc()],
    )


class CartItem(Base):
    __tablename__ = "cart_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cart_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("carts.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    item_type: Mapped[str] = mapped_column(String(20), nullable=False)
    product_variant_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("product_variants.id", ondelete="CASCADE"), nullable=True,
    )
    ticket_type_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("ticket_types.id", ondelete="CASCADE"), nullable=True,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    cart: Mapped["Cart"] = relationship("Cart", back_populates="items")
    product_variant: Mapped["ProductVariant | None"] = relationship("ProductVariant")
    ticket_type: Mapped["TicketType | None"] = relationship("TicketType")
