"""LinkUp Application Package — event ticketing and shop backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
