"""Request Dependencies — the acting principal for organizer and shopper routes.

Invariants:
    - Organizer routes always receive an OrganizerId, shopper routes a UserId
    - Values come from settings until real authentication replaces them

Design Decisions:
    - Dependencies rather than module constants: tests override them via
      app.dependency_overrides to act as another organizer or user
"""

from fastapi import Depends

from linkup.config import Settings, get_settings
from linkup.core.domain_types import OrganizerId, UserId


def get_organizer_id(settings: Settings = Depends(get_settings)) -> OrganizerId:
    return OrganizerId(settings.mock_organizer_id)


def get_user_id(settings: Settings = Depends(get_settings)) -> UserId:
    return UserId(settings.mock_user_id)
