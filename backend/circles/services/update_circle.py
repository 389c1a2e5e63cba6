"""Update Circle: partial rename / resize of an existing circle."""

import logging
from dataclasses import dataclass

from circles.core.domain_types import CircleId
from circles.core.repository_protocols import CircleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateCircleInput:
    id: int
    circle_name: str | None = None
    capacity: int | None = None


class UpdateCircleUsecase:
    def __init__(self, repository: CircleRepository):
        self.repository = repository

    async def execute(self, data: UpdateCircleInput) -> int:
        """Returns the id of the updated circle."""
        circle = await self.repository.find_by_id(CircleId(data.id))
        circle.update(name=data.circle_name, capacity=data.capacity)
        updated = await self.repository.update(circle)
        logger.info(
            f"Circle renamed/resized to {updated.name!r}/{updated.capacity}",
            extra={"circle_id": data.id, "operation": "update"},
        )
        return int(updated.id)
