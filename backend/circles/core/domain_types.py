"""Domain Types: value objects that replace bare primitives across the codebase.

Invariants:
    - CircleId and MemberId wrap int; values <= 0 mean "not yet persisted"
    - Grade is bounded 1-4 (academic year) and immutable
    - Major is a closed set; unknown strings never become a Major

Design Decisions:
    - NewType for identifiers: zero runtime cost, int equality/ordering for free
    - Grade as frozen dataclass: the bound is checked once, at construction
    - str Enum for Major: serializes to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType

from circles.core.enforce_circle import check_grade
from circles.core.errors import ValidationError


# ─── Identity Types ──────────────────────────────────────────────

CircleId = NewType("CircleId", int)
MemberId = NewType("MemberId", int)

UNASSIGNED_ID: int = 0

# Largest value the INTEGER id and count columns hold
MAX_STORED_INT: int = 2**31 - 1


def is_assigned(identifier: int) -> bool:
    """True once the store has handed out an id."""
    return identifier > UNASSIGNED_ID


def fits_column(value: int) -> bool:
    """True when value can be written to or looked up in an INTEGER column."""
    return 0 <= value <= MAX_STORED_INT


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True, order=True)
class Grade:
    """Academic year of a member."""
    value: int

    def __post_init__(self):
        error = check_grade(self.value)
        if error:
            raise ValidationError.from_check(error)

    def __int__(self) -> int:
        return self.value


class Major(str, Enum):
    """Fields of study a member can belong to."""
    MUSIC = "Music"
    MATH = "Math"
    PHYSICS = "Physics"
    COMPUTER_SCIENCE = "ComputerScience"
    ECONOMICS = "Economics"
    LITERATURE = "Literature"
    ART = "Art"
    OTHER = "Other"

    @classmethod
    def parse(cls, raw: str) -> "Major":
        """Case-insensitive lookup by value; seed data stores lowercase majors."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            wanted = raw.strip().lower()
            for major in cls:
                if major.value.lower() == wanted:
                    return major
        raise ValidationError(
            f"Unknown major {raw!r}. Expected one of: "
            f"{', '.join(m.value for m in cls)}",
            "major", "INVALID_MAJOR",
        )
