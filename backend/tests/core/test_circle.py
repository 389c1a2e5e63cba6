"""Circle Aggregate: tests for creation, membership, and partial update.

Tests cover:
    - create() starts with no members and the given owner
    - add_member respects capacity (owner counts) and rejects duplicates
    - update() is partial and never shrinks below owner + members
    - reconstruct() rejects an owner duplicated among members
"""

import pytest

from circles.core.circle import Circle
from circles.core.domain_types import CircleId, Grade, Major, MemberId
from circles.core.errors import DataIntegrityError, ValidationError
from circles.core.member import Member


def _owner() -> Member:
    return Member.create("John Lennon", 21, Grade(3), Major.MUSIC)


def _persisted(member_id: int, name: str) -> Member:
    return Member.reconstruct(MemberId(member_id), name, 20, Grade(2), Major.MUSIC)


# ─── create ──────────────────────────────────────────────────────

@pytest.mark.parametrize("capacity", [1, 2, 10, 500])
def test_create_has_owner_and_no_members(capacity):
    owner = _owner()
    circle = Circle.create("Music club", capacity, owner)
    assert circle.members == []
    assert circle.owner == owner
    assert circle.capacity == capacity
    assert circle.member_count == 1


@pytest.mark.parametrize("capacity", [0, -1])
def test_create_rejects_capacity_below_one(capacity):
    with pytest.raises(ValidationError) as exc_info:
        Circle.create("Music club", capacity, _owner())
    assert exc_info.value.code == "INVALID_CAPACITY"


def test_create_rejects_empty_name():
    with pytest.raises(ValidationError) as exc_info:
        Circle.create(" ", 5, _owner())
    assert exc_info.value.field == "circle_name"


# ─── add_member / remove_member ──────────────────────────────────

def test_add_member_until_full():
    circle = Circle.create("Music club", 3, _owner())
    circle.add_member(Member.create("Paul", 20, Grade(2), Major.MUSIC))
    circle.add_member(Member.create("George", 19, Grade(1), Major.MUSIC))

    with pytest.raises(ValidationError) as exc_info:
        circle.add_member(Member.create("Ringo", 22, Grade(4), Major.MUSIC))
    assert exc_info.value.code == "CIRCLE_FULL"
    assert len(circle.members) == 2


def test_add_member_rejected_when_only_owner_fits():
    circle = Circle.create("Solo", 1, _owner())
    with pytest.raises(ValidationError):
        circle.add_member(Member.create("Paul", 20, Grade(2), Major.MUSIC))


def test_add_member_rejects_existing_member():
    owner = _persisted(1, "John")
    circle = Circle.reconstruct(CircleId(1), "Music club", owner, 5, [_persisted(2, "Paul")])

    with pytest.raises(ValidationError) as exc_info:
        circle.add_member(_persisted(2, "Paul"))
    assert exc_info.value.code == "DUPLICATE_MEMBER"
    with pytest.raises(ValidationError):
        circle.add_member(owner)


def test_remove_member():
    circle = Circle.reconstruct(
        CircleId(1), "Music club", _persisted(1, "John"), 5, [_persisted(2, "Paul")],
    )
    circle.remove_member(MemberId(2))
    assert circle.members == []


def test_remove_owner_or_unknown_fails():
    circle = Circle.reconstruct(CircleId(1), "Music club", _persisted(1, "John"), 5, [])
    with pytest.raises(ValidationError) as exc_info:
        circle.remove_member(MemberId(1))
    assert exc_info.value.code == "OWNER_REMOVAL"
    with pytest.raises(ValidationError) as exc_info:
        circle.remove_member(MemberId(42))
    assert exc_info.value.code == "UNKNOWN_MEMBER"


# ─── update ──────────────────────────────────────────────────────

def test_update_capacity_only_keeps_name():
    circle = Circle.create("Music club", 10, _owner())
    circle.update(capacity=20)
    assert circle.name == "Music club"
    assert circle.capacity == 20


def test_update_name_only_keeps_capacity():
    circle = Circle.create("Music club", 10, _owner())
    circle.update(name="Football club")
    assert circle.name == "Football club"
    assert circle.capacity == 10


def test_update_below_member_count_fails_and_changes_nothing():
    circle = Circle.create("Music club", 3, _owner())
    circle.add_member(Member.create("Paul", 20, Grade(2), Major.MUSIC))

    with pytest.raises(ValidationError) as exc_info:
        circle.update(name="Smaller club", capacity=1)

    assert exc_info.value.code == "CAPACITY_TOO_SMALL"
    assert circle.name == "Music club"
    assert circle.capacity == 3


def test_update_to_exact_member_count_succeeds():
    circle = Circle.create("Music club", 5, _owner())
    circle.add_member(Member.create("Paul", 20, Grade(2), Major.MUSIC))
    circle.update(capacity=2)
    assert circle.capacity == 2


def test_update_rejects_empty_name():
    circle = Circle.create("Music club", 5, _owner())
    with pytest.raises(ValidationError):
        circle.update(name="")


# ─── reconstruct ─────────────────────────────────────────────────

def test_reconstruct_rejects_owner_among_members():
    owner = _persisted(1, "John")
    with pytest.raises(DataIntegrityError):
        Circle.reconstruct(CircleId(1), "Music club", owner, 5, [owner])
