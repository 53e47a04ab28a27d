"""Common Schemas — success envelope and partial-update base.

Invariants:
    - Every success body is {"status": "success", "data": ...}
    - Partial updates never write NULL into a non-nullable column
"""

from typing import ClassVar, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Success envelope shared by all resource routes."""
    status: Literal["success"] = "success"
    data: T


class MessageEnvelope(BaseModel, Generic[T]):
    """Success envelope with a human-readable message (auth routes)."""
    status: Literal["success"] = "success"
    message: str
    data: T


class ReadModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class PartialUpdate(BaseModel):
    """Base for PUT/PATCH bodies: every field optional, applied with exclude_unset.

    Subclasses list columns that may be omitted but never set to null.
    """
    model_config = ConfigDict(use_enum_values=True)

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
