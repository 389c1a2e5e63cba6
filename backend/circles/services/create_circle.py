"""Create Circle: builds the owner and the circle, then persists both as one unit."""

import logging
from dataclasses import dataclass

from circles.core.circle import Circle
from circles.core.domain_types import Grade, Major
from circles.core.member import Member
from circles.core.repository_protocols import CircleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateCircleInput:
    circle_name: str
    capacity: int
    owner_name: str
    owner_age: int
    owner_grade: int
    owner_major: str


@dataclass(frozen=True)
class CreateCircleOutput:
    circle_id: int
    owner_id: int


class CreateCircleUsecase:
    def __init__(self, repository: CircleRepository):
        self.repository = repository

    async def execute(self, data: CreateCircleInput) -> CreateCircleOutput:
        owner = Member.create(
            data.owner_name,
            data.owner_age,
            Grade(data.owner_grade),
            Major.parse(data.owner_major),
        )
        circle = Circle.create(data.circle_name, data.capacity, owner)
        created = await self.repository.create(circle)
        logger.info(
            f"Circle {created.name!r} created",
            extra={"circle_id": int(created.id), "operation": "create"},
        )
        return CreateCircleOutput(
            circle_id=int(created.id), owner_id=int(created.owner.id),
        )
