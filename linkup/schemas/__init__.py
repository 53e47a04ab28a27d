"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Domain enums from core/ used for status/type fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Read models use from_attributes so ORM rows serialize directly
"""
