"""Fetch Circle: reads one aggregate and flattens it for the HTTP response.

Invariants:
    - Owner appears once, under "owner"; members lists only non-owners
"""

from dataclasses import dataclass, field

from circles.core.circle import Circle
from circles.core.domain_types import CircleId
from circles.core.member import Member
from circles.core.repository_protocols import CircleRepository


@dataclass(frozen=True)
class MemberOutput:
    id: int
    name: str
    age: int
    grade: int
    major: str

    @classmethod
    def from_member(cls, member: Member) -> "MemberOutput":
        return cls(
            id=int(member.id),
            name=member.name,
            age=member.age,
            grade=member.grade.value,
            major=member.major.value,
        )


@dataclass(frozen=True)
class FetchCircleOutput:
    circle_id: int
    circle_name: str
    capacity: int
    owner: MemberOutput
    members: list[MemberOutput] = field(default_factory=list)

    @classmethod
    def from_circle(cls, circle: Circle) -> "FetchCircleOutput":
        return cls(
            circle_id=int(circle.id),
            circle_name=circle.name,
            capacity=circle.capacity,
            owner=MemberOutput.from_member(circle.owner),
            members=[MemberOutput.from_member(m) for m in circle.members],
        )


class FetchCircleUsecase:
    def __init__(self, repository: CircleRepository):
        self.repository = repository

    async def execute(self, circle_id: int) -> FetchCircleOutput:
        circle = await self.repository.find_by_id(CircleId(circle_id))
        return FetchCircleOutput.from_circle(circle)
