"""Core Layer — pure domain rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Rules take `now` as an argument; only timekeeping.utc_now() reads the clock

Design Decisions:
    - Functional core separated from imperative shell: cart, pricing and
      schedule rules are testable without a database
"""
