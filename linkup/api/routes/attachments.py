"""Attachment Routes — /api/v1/organizer/events/{event_id}/attachments (metadata only)."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.api.deps import get_organizer_id
from linkup.core.domain_types import OrganizerId
from linkup.infrastructure.database import get_db
from linkup.schemas.common import Envelope
from linkup.schemas.ticketing import AttachmentCreate, AttachmentRead
from linkup.services import attachments as attachment_service

router = APIRouter(
    prefix="/api/v1/organizer/events/{event_id}/attachments",
    tags=["attachments"],
)


@router.get("", response_model=Envelope[list[AttachmentRead]])
async def list_attachments(
    event_id: int,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    attachments = await attachment_service.list_attachments(
        db, organizer_id, event_id,
    )
    return Envelope(data=[AttachmentRead.model_validate(a) for a in attachments])


@router.post(
    "", response_model=Envelope[AttachmentRead],
    status_code=status.HTTP_201_CREATED,
)
async def create_attachment(
    event_id: int,
    body: AttachmentCreate,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    attachment = await attachment_service.create_attachment(
        db, organizer_id, event_id, body,
    )
    return Envelope(data=AttachmentRead.model_validate(attachment))


@router.delete(
    "/{attachment_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_attachment(
    event_id: int,
    attachment_id: int,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    await attachment_service.delete_attachment(
        db, organizer_id, event_id, attachment_id,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
