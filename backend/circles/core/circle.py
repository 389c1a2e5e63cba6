"""Circle Aggregate: a club with one owner and zero or more other members.

Invariants:
    - members never contains the owner
    - capacity >= 1 + len(members) after every public operation
    - All changes go through create/add_member/remove_member/update;
      a failed operation leaves the aggregate untouched

Design Decisions:
    - The owner is NOT part of members: the storage layer keeps the owner as a
      member row, and circle_mapper does the split/merge at that boundary only
    - reconstruct() raises DataIntegrityError, not ValidationError: its only
      caller is rehydration, where a duplicated owner means corrupt rows
"""

from dataclasses import dataclass, field

from circles.core.domain_types import CircleId, MemberId, UNASSIGNED_ID, is_assigned
from circles.core.enforce_circle import check_can_join, check_capacity, check_name
from circles.core.errors import DataIntegrityError, ValidationError
from circles.core.member import Member


@dataclass
class Circle:
    """Circle aggregate root."""

    id: CircleId
    name: str
    capacity: int
    owner: Member
    members: list[Member] = field(default_factory=list)

    @classmethod
    def create(cls, name: str, capacity: int, owner: Member) -> "Circle":
        """New circle whose only participant is its owner."""
        for error in (check_name(name, "circle_name"), check_capacity(capacity)):
            if error:
                raise ValidationError.from_check(error)
        return cls(CircleId(UNASSIGNED_ID), name.strip(), capacity, owner, [])

    @classmethod
    def reconstruct(
        cls,
        id: CircleId,
        name: str,
        owner: Member,
        capacity: int,
        members: list[Member],
    ) -> "Circle":
        if any(m.id == owner.id for m in members):
            raise DataIntegrityError(
                f"Owner {owner.id} duplicated among members", circle_id=id,
            )
        return cls(id, name, capacity, owner, list(members))

    @property
    def member_count(self) -> int:
        """Number of participants including the owner."""
        return len(self.members) + 1

    def has_member(self, member_id: MemberId) -> bool:
        if not is_assigned(member_id):
            return False
        return self.owner.id == member_id or any(
            m.id == member_id for m in self.members
        )

    def add_member(self, member: Member) -> None:
        if self.has_member(member.id):
            raise ValidationError(
                f"Member {member.id} already belongs to this circle",
                "members", "DUPLICATE_MEMBER",
            )
        error = check_can_join(self.capacity, len(self.members))
        if error:
            raise ValidationError.from_check(error)
        self.members.append(member)

    def remove_member(self, member_id: MemberId) -> None:
        if self.owner.id == member_id:
            raise ValidationError(
                "The owner cannot leave the circle", "members", "OWNER_REMOVAL",
            )
        remaining = [m for m in self.members if m.id != member_id]
        if len(remaining) == len(self.members):
            raise ValidationError(
                f"Member {member_id} does not belong to this circle",
                "members", "UNKNOWN_MEMBER",
            )
        self.members = remaining

    def update(self, name: str | None = None, capacity: int | None = None) -> None:
        """Partial update; None leaves a field unchanged."""
        new_name = self.name if name is None else name
        new_capacity = self.capacity if capacity is None else capacity
        for error in (
            check_name(new_name, "circle_name"),
            check_capacity(new_capacity, len(self.members)),
        ):
            if error:
                raise ValidationError.from_check(error)
        self.name = new_name.strip()
        self.capacity = new_capacity
