"""API Schemas: Pydantic request/response bodies for the HTTP boundary.

Invariants:
    - Schemas check shape and types only; domain rules are enforced in core/
"""
