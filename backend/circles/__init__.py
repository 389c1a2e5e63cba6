"""Circles Application Package: club and membership backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
