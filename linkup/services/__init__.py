"""Services Layer — persistence orchestration around the pure core.

Invariants:
    - One module per resource; functions take an AsyncSession explicitly
    - Ownership checks happen here, before any write
    - Services raise LinkUpError subclasses, never HTTPException

Design Decisions:
    - Plain async functions over service classes: CRUD has no per-request state
"""
