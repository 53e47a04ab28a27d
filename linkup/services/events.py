"""Event Service — organizer-scoped event CRUD and copy.

Invariants:
    - Every read/write filters on organizer_id (foreign events look missing)
    - Created and copied events are DRAFT
    - Schedule checked with merged values before every write
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.core.domain_types import EventStatus, OrganizerId
from linkup.core.errors import ResourceNotFoundError
from linkup.core.event_rules import check_schedule, copyable_fields
from linkup.core.timekeeping import as_utc, utc_now
from linkup.models.event import Event
from linkup.schemas.event import EventCreate, EventUpdate

logger = logging.getLogger(__name__)


async def get_owned_event(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int,
) -> Event:
    """Get an event owned by the organizer or raise 404."""
    result = await db.execute(
        select(Event).where(
            Event.id == event_id, Event.organizer_id == organizer_id,
        ),
    )
    event = result.scalar_one_or_none()
    if not event:
        raise ResourceNotFoundError("Event", event_id)
    return event


async def list_events(
    db: AsyncSession, organizer_id: OrganizerId,
) -> list[Event]:
    result = await db.execute(
        select(Event)
        .where(Event.organizer_id == organizer_id)
        .order_by(Event.start_time.desc(), Event.id.desc()),
    )
    return list(result.scalars().all())


async def create_event(
    db: AsyncSession, organizer_id: OrganizerId, body: EventCreate,
    default_cover_image: str,
) -> Event:
    now = utc_now()
    start_time = as_utc(body.start_time) or now
    end_time = as_utc(body.end_time) or start_time
    check_schedule(start_time, end_time)
    event = Event(
        organizer_id=organizer_id,
        title=body.title,
        description=body.description,
        status=EventStatus.DRAFT.value,
        event_type=body.event_type,
        start_time=start_time,
        end_time=end_time,
        location=body.location,
        online_url=body.online_url,
        cover_image=body.cover_image or default_cover_image,
        created_at=now,
        updated_at=now,
    )
    db.add(event)
    await db.commit()
    logger.info(
        f"Event {event.id} created", extra={"event_id": event.id, "organizer_id": organizer_id},
    )
    return event


async def update_event(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int, body: EventUpdate,
) -> Event:
    event = await get_owned_event(db, organizer_id, event_id)
    changes = body.changes()
    for field in ("start_time", "end_time"):
        if field in changes:
            changes[field] = as_utc(changes[field])
    check_schedule(
        changes.get("start_time", event.start_time),
        changes.get("end_time", event.end_time),
    )
    for field, value in changes.items():
        setattr(event, field, value)
    event.updated_at = utc_now()
    await db.commit()
    logger.info(
        f"Event {event_id} updated: {sorted(changes)}", extra={"event_id": event_id},
    )
    return event


async def delete_event(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int,
) -> None:
    event = await get_owned_event(db, organizer_id, event_id)
    await db.delete(event)
    await db.commit()
    logger.info(f"Event {event_id} deleted", extra={"event_id": event_id})


async def copy_event(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int,
) -> Event:
    """Duplicate an event's own columns as a new DRAFT (children are not copied)."""
    source = await get_owned_event(db, organizer_id, event_id)
    values = {
        column.key: getattr(source, column.key)
        for column in Event.__table__.columns
    }
    now = utc_now()
    copy = Event(**copyable_fields(values), created_at=now, updated_at=now)
    db.add(copy)
    await db.commit()
    logger.info(
        f"Event {event_id} copied to {copy.id}", extra={"event_id": copy.id},
    )
    return copy
