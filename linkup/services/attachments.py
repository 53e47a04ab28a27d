"""Attachment Service — file metadata linked to an organizer's event."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.core.domain_types import OrganizerId
from linkup.core.errors import ResourceNotFoundError
from linkup.models.attachment import Attachment
from linkup.schemas.ticketing import AttachmentCreate
from linkup.services.events import get_owned_event

logger = logging.getLogger(__name__)


async def list_attachments(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int,
) -> list[Attachment]:
    await get_owned_event(db, organizer_id, event_id)
    result = await db.execute(
        select(Attachment)
        .where(Attachment.event_id == event_id)
        .order_by(Attachment.created_at, Attachment.id),
    )
    return list(result.scalars().all())


async def create_attachment(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int,
    body: AttachmentCreate,
) -> Attachment:
    await get_owned_event(db, organizer_id, event_id)
    attachment = Attachment(event_id=event_id, **body.model_dump())
    db.add(attachment)
    await db.commit()
    logger.info(
        f"Attachment {attachment.id} ({attachment.file_name}) added",
        extra={"event_id": event_id},
    )
    return attachment


async def delete_attachment(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int, attachment_id: int,
) -> None:
    await get_owned_event(db, organizer_id, event_id)
    result = await db.execute(
        select(Attachment).where(
            Attachment.id == attachment_id, Attachment.event_id == event_id,
        ),
    )
    attachment = result.scalar_one_or_none()
    if not attachment:
        raise ResourceNotFoundError("Attachment", attachment_id)
    await db.delete(attachment)
    await db.commit()
    logger.info(f"Attachment {attachment_id} deleted", extra={"event_id": event_id})
