"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Each method is one all-or-nothing unit against the store

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - create/update return the persisted aggregate so callers see assigned ids
"""

from typing import Protocol

from circles.core.circle import Circle
from circles.core.domain_types import CircleId


class CircleRepository(Protocol):
    """Contract for circle persistence - implemented by infrastructure."""
    async def find_by_id(self, circle_id: CircleId) -> Circle: ...
    async def create(self, circle: Circle) -> Circle: ...
    async def update(self, circle: Circle) -> Circle: ...
    async def delete(self, circle: Circle) -> None: ...
