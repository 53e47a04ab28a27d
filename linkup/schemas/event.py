"""Event Schemas — organizer event create/update/read contracts.

Invariants:
    - EventCreate.title: 1-200 chars, stripped, non-empty
    - status cannot be chosen on create (always DRAFT)
    - start_time/end_time default to now when omitted
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from linkup.core.domain_types import EventStatus, EventType
from linkup.schemas.common import PartialUpdate, ReadModel


def _strip_title(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty or whitespace")
    return v


class EventCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    event_type: EventType = EventType.OFFLINE
    start_time: datetime | None = None
    end_time: datetime | None = None
    location: str | None = Field(None, max_length=300)
    online_url: str | None = Field(None, max_length=500)
    cover_image: str | None = Field(None, max_length=500)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return _strip_title(v)


class EventUpdate(PartialUpdate):
    non_nullable = ("title", "status", "event_type", "start_time", "end_time")

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    status: EventStatus | None = None
    event_type: EventType | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    location: str | None = Field(None, max_length=300)
    online_url: str | None = Field(None, max_length=500)
    cover_image: str | None = Field(None, max_length=500)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return _strip_title(v)


class EventRead(ReadModel):
    id: int
    organizer_id: int
    title: str
    description: str | None
    status: str
    event_type: str
    start_time: datetime
    end_time: datetime
    location: str | None
    online_url: str | None
    cover_image: str | None
    created_at: datetime
    updated_at: datetime
