"""Membership Use Cases: join and leave an existing circle.

Invariants:
    - Capacity and duplicate checks run in the aggregate before the write
    - The owner can never leave through remove
    - The new member's id is read back from the persisted aggregate

Design Decisions:
    - Both operations go through CircleRepository.update(): membership is part
      of the aggregate, so there is no separate member repository
"""

from dataclasses import dataclass

from circles.core.domain_types import CircleId, Grade, Major, MemberId
from circles.core.member import Member
from circles.core.repository_protocols import CircleRepository


@dataclass(frozen=True)
class AddMemberInput:
    circle_id: int
    name: str
    age: int
    grade: int
    major: str


@dataclass(frozen=True)
class AddMemberOutput:
    circle_id: int
    member_id: int


class AddMemberUsecase:
    def __init__(self, repository: CircleRepository):
        self.repository = repository

    async def execute(self, data: AddMemberInput) -> AddMemberOutput:
        member = Member.create(
            data.name, data.age, Grade(data.grade), Major.parse(data.major),
        )
        circle = await self.repository.find_by_id(CircleId(data.circle_id))
        known_ids = {m.id for m in circle.members}
        circle.add_member(member)
        updated = await self.repository.update(circle)
        # Existing members keep their ids, so the only unknown id is the new row
        new_ids = [m.id for m in updated.members if m.id not in known_ids]
        return AddMemberOutput(circle_id=int(updated.id), member_id=int(new_ids[-1]))


class RemoveMemberUsecase:
    def __init__(self, repository: CircleRepository):
        self.repository = repository

    async def execute(self, circle_id: int, member_id: int) -> int:
        circle = await self.repository.find_by_id(CircleId(circle_id))
        circle.remove_member(MemberId(member_id))
        await self.repository.update(circle)
        return member_id
