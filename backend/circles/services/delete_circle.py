"""Delete Circle: removes the circle row and every member row it owns."""

from circles.core.domain_types import CircleId
from circles.core.repository_protocols import CircleRepository


class DeleteCircleUsecase:
    def __init__(self, repository: CircleRepository):
        self.repository = repository

    async def execute(self, circle_id: int) -> int:
        circle = await self.repository.find_by_id(CircleId(circle_id))
        await self.repository.delete(circle)
        return circle_id
