"""Core Layer: pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Aggregates validate on construction and raise CircleError subclasses

Design Decisions:
    - Functional core separated from imperative shell: repositories and routes
      live outside core and only see aggregates through their public methods
"""
