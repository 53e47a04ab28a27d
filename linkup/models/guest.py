"""Guest ORM — a person on an event's guest list.

Invariants:
    - email is unique within an event
    - ticket_type_id, when set, references a ticket type of the same event
      (enforced in services/guests.py); SET NULL when that ticket type is deleted
    - checked_in_at is set iff checked_in is True
"""

from datetime import datetime, timezone

from sqlalchemy import (
    String, Integer, Boolean, DateTime, ForeignKey, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from linkup.db.base import Base


class Guest(Base):
    __tablename__ = "guests"
    __table_args__ = (
        UniqueConstraint("event_id", "email", name="uq_guests_event_email"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    ticket_type_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("ticket_types.id", ondelete="SET NULL"), nullable=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    checked_in: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    checked_in_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    event: Mapped["Event"] = relationship("Event", back_populates="guests")
