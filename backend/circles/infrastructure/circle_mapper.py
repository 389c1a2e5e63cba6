"""Circle Mapper: converts between the Circle aggregate and its relational row-set.

Invariants:
    - Storage form = one CircleRow + one MemberRow per participant, owner included
    - Every MemberRow carries the circle's id in circle_id
    - from_storage never puts the owner into Circle.members
    - from_storage(*to_storage(c)) == c for any circle with assigned ids

Design Decisions:
    - Plain dataclasses for rows, not ORM instances: the mapper is testable
      without a database and the repository controls every statement
    - Owner row emitted first so inserts create it before other members
    - A stored grade/major that fails validation is a DataIntegrityError:
      the row was written by something other than this aggregate
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from circles.core.circle import Circle
from circles.core.domain_types import CircleId, Grade, Major, MemberId
from circles.core.errors import DataIntegrityError, ValidationError
from circles.core.member import Member


@dataclass(frozen=True)
class CircleRow:
    id: int
    name: str
    owner_id: int
    capacity: int

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "CircleRow":
        return cls(
            id=row["id"], name=row["name"],
            owner_id=row["owner_id"], capacity=row["capacity"],
        )


@dataclass(frozen=True)
class MemberRow:
    id: int
    name: str
    age: int
    grade: int
    major: str
    circle_id: int

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "MemberRow":
        return cls(
            id=row["id"], name=row["name"], age=row["age"],
            grade=row["grade"], major=row["major"], circle_id=row["circle_id"],
        )


def member_to_row(member: Member, circle_id: int) -> MemberRow:
    return MemberRow(
        id=int(member.id),
        name=member.name,
        age=member.age,
        grade=member.grade.value,
        major=member.major.value,
        circle_id=circle_id,
    )


def row_to_member(row: MemberRow) -> Member:
    try:
        grade = Grade(row.grade)
        major = Major.parse(row.major)
    except ValidationError as e:
        raise DataIntegrityError(
            f"Member row {row.id} holds an invalid value: {e.message}",
            circle_id=row.circle_id,
        ) from e
    return Member.reconstruct(MemberId(row.id), row.name, row.age, grade, major)


def to_storage(circle: Circle) -> tuple[CircleRow, list[MemberRow]]:
    """Flatten the aggregate: circle row plus owner row plus member rows."""
    circle_id = int(circle.id)
    circle_row = CircleRow(
        id=circle_id,
        name=circle.name,
        owner_id=int(circle.owner.id),
        capacity=circle.capacity,
    )
    member_rows = [member_to_row(circle.owner, circle_id)]
    member_rows.extend(member_to_row(m, circle_id) for m in circle.members)
    return circle_row, member_rows


def from_storage(circle_row: CircleRow, member_rows: Iterable[MemberRow]) -> Circle:
    """Rebuild the aggregate, splitting the owner out of the member rows."""
    owner_row: MemberRow | None = None
    others: list[MemberRow] = []
    for row in member_rows:
        if row.id == circle_row.owner_id and owner_row is None:
            owner_row = row
        else:
            others.append(row)

    if owner_row is None:
        raise DataIntegrityError("Owner not found", circle_id=circle_row.id)

    return Circle.reconstruct(
        CircleId(circle_row.id),
        circle_row.name,
        row_to_member(owner_row),
        circle_row.capacity,
        [row_to_member(r) for r in others],
    )
