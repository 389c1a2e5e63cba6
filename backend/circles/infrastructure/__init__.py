"""Infrastructure Layer: database access, row mapping, and cross-cutting concerns.

Invariants:
    - Infrastructure depends on core/, never the other way round
    - All store calls mapped to StoreError before reaching routes
"""
