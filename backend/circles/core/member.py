"""Member: a person belonging to a circle.

Invariants:
    - create() validates name and age; grade/major arrive already validated
    - reconstruct() trusts its input (rehydration from storage only)
    - Frozen: a changed member is a new Member
"""

from dataclasses import dataclass

from circles.core.domain_types import Grade, Major, MemberId, UNASSIGNED_ID
from circles.core.enforce_circle import check_age, check_name
from circles.core.errors import ValidationError


@dataclass(frozen=True)
class Member:
    id: MemberId
    name: str
    age: int
    grade: Grade
    major: Major

    @classmethod
    def create(cls, name: str, age: int, grade: Grade, major: Major) -> "Member":
        """New member with an unassigned id."""
        for error in (check_name(name), check_age(age)):
            if error:
                raise ValidationError.from_check(error)
        return cls(MemberId(UNASSIGNED_ID), name.strip(), age, grade, major)

    @classmethod
    def reconstruct(
        cls, id: MemberId, name: str, age: int, grade: Grade, major: Major,
    ) -> "Member":
        return cls(id, name, age, grade, major)
