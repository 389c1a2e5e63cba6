"""Circle Rule Checks: tests for the pure check functions.

Tests cover:
    - Checks return None on success and a descriptor on failure
    - Descriptors carry status, error_code, field, and message
    - Capacity accounts for the owner on top of members
"""

from circles.core.enforce_circle import (
    MAX_GRADE, MIN_GRADE,
    check_age, check_can_join, check_capacity, check_grade, check_name,
)


def test_check_grade_bounds():
    assert check_grade(MIN_GRADE) is None
    assert check_grade(MAX_GRADE) is None
    result = check_grade(MAX_GRADE + 1)
    assert result["status"] == "error"
    assert result["error_code"] == "INVALID_GRADE"
    assert result["field"] == "grade"


def test_check_name_rejects_blank():
    assert check_name("Alice") is None
    assert check_name("   ")["error_code"] == "EMPTY_NAME"
    assert check_name("", "circle_name")["field"] == "circle_name"


def test_check_age_requires_positive():
    assert check_age(18) is None
    assert check_age(0)["error_code"] == "INVALID_AGE"
    assert check_age(-3)["error_code"] == "INVALID_AGE"


def test_check_capacity_minimum_is_one():
    assert check_capacity(1) is None
    assert check_capacity(0)["error_code"] == "INVALID_CAPACITY"


def test_check_capacity_counts_owner():
    assert check_capacity(3, member_count=2) is None
    result = check_capacity(2, member_count=2)
    assert result["error_code"] == "CAPACITY_TOO_SMALL"


def test_check_can_join():
    assert check_can_join(capacity=3, member_count=1) is None
    assert check_can_join(capacity=2, member_count=1)["error_code"] == "CIRCLE_FULL"
    assert check_can_join(capacity=1, member_count=0)["error_code"] == "CIRCLE_FULL"
