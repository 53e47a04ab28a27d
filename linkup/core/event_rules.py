"""Event Rules — schedule validation and copy semantics for organizer events.

Invariants:
    - end_time is never before start_time
    - A copied event never keeps id, created_at or updated_at
    - A copied event is always DRAFT, whatever the source status

Design Decisions:
    - copyable_fields works on a plain column dict, not the ORM object,
      so the shell decides which columns exist
"""

from datetime import datetime

from linkup.core.domain_types import COPY_SUFFIX, EventStatus
from linkup.core.errors import InvalidRequestError
from linkup.core.timekeeping import as_utc

_IDENTITY_FIELDS = ("id", "created_at", "updated_at")


def check_schedule(start_time: datetime, end_time: datetime) -> None:
    """Raise InvalidRequestError when the event would end before it starts."""
    if as_utc(end_time) < as_utc(start_time):
        raise InvalidRequestError(
            "end_time must not be before start_time", "end_time",
        )


def copy_title(title: str) -> str:
    return f"{title}{COPY_SUFFIX}"


def copyable_fields(values: dict) -> dict:
    """Build the column values for a copy of an event.

    >>> copyable_fields({"id": 3, "title": "Gig", "status": "PUBLISHED"})
    {'title': 'Gig - Copy', 'status': 'DRAFT'}
    """
    data = {k: v for k, v in values.items() if k not in _IDENTITY_FIELDS}
    data["title"] = copy_title(values["title"])
    data["status"] = EventStatus.DRAFT.value
    return data
