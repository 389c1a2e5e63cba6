"""Services Layer: one use case per request.

Invariants:
    - Each use case builds value objects from raw input first, so validation
      errors surface before any store access
    - Each use case performs at most one repository write; updates read the
      aggregate first and write it back whole
"""
