"""Infrastructure Layer — database, password hashing and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Blocking work (bcrypt) runs off the event loop
"""
