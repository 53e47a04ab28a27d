"""Event ORM — the organizer-owned aggregate root for ticketing.

Invariants:
    - organizer_id scopes every organizer query (no cross-organizer access)
    - status is one of EventStatus; new events start as DRAFT
    - end_time >= start_time (checked in core/event_rules.py before write)

Design Decisions:
    - organizer_id is a plain indexed column, not a FK: the organizer is a
      configured mock principal and may not exist in users
    - Children (ticket types, guests, coupons, attachments) use ON DELETE CASCADE
      with passive_deletes, so deleting an event never loads its children
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from linkup.core.domain_types import EventStatus, EventType
from linkup.db.base import Base


class Event(Base):
    """Event aggregate root — owns ticket types, guests, coupons, attachments."""
    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    organizer_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=EventStatus.DRAFT.value,
    )
    event_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default=EventType.OFFLINE.value,
    )
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    location: Mapped[str | None] = mapped_column(String(300), nullable=True)
    online_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    cover_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    ticket_types: Mapped[list["TicketType"]] = relationship(
        "TicketType", back_populates="event",
        cascade="all, delete-orphan", passive_deletes=True,
    )
    guests: Mapped[list["Guest"]] = relationship(
        "Guest", back_populates="event",
        cascade="all, delete-orphan", passive_deletes=True,
    )
    coupons: Mapped[list["Coupon"]] = relationship(
        "Coupon", back_populates="event",
        cascade="all, delete-orphan", passive_deletes=True,
    )
    attachments: Mapped[list["Attachment"]] = relationship(
        "Attachment", back_populates="event",
        cascade="all, delete-orphan", passive_deletes=True,
    )
