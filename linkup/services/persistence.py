"""Persistence Helpers — commit with unique-violation mapping.

Invariants:
    - A failed commit is always rolled back before the error propagates
    - IntegrityError on commit becomes DuplicateResourceError (409)
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.core.errors import DuplicateResourceError

logger = logging.getLogger(__name__)


async def commit_or_conflict(
    db: AsyncSession, resource_type: str, field: str, value: object,
) -> None:
    """Commit the unit of work; unique violations surface as 409."""
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Unique violation on {resource_type}.{field}: {e.orig}")
        raise DuplicateResourceError(resource_type, field, value)
