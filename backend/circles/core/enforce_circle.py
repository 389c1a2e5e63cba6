"""Circle Rule Checks: pure validation of member and circle invariants.

Invariants:
    - Every check is PURE: returns an error descriptor or None, never raises
    - Descriptors share one shape: {"status", "error_code", "field", "message"}
    - MIN_GRADE / MAX_GRADE and MIN_CAPACITY are the single source of truth

Design Decisions:
    - Aggregates call these and raise ValidationError.from_check(); callers that
      want to inspect a failure before constructing can call them directly
"""

MIN_GRADE: int = 1
MAX_GRADE: int = 4
MIN_CAPACITY: int = 1


def _error(error_code: str, field: str, message: str) -> dict:
    return {
        "status": "error",
        "error_code": error_code,
        "field": field,
        "message": message,
    }


def check_grade(value: int) -> dict | None:
    """Grade is an academic year, 1-4 inclusive."""
    if isinstance(value, bool) or not isinstance(value, int):
        return _error("INVALID_GRADE", "grade", f"Grade must be an integer, got {value!r}")
    if not MIN_GRADE <= value <= MAX_GRADE:
        return _error(
            "INVALID_GRADE", "grade",
            f"Grade must be between {MIN_GRADE} and {MAX_GRADE}, got {value}",
        )
    return None


def check_name(value: str, field: str = "name") -> dict | None:
    if not isinstance(value, str) or not value.strip():
        return _error("EMPTY_NAME", field, f"{field} cannot be empty")
    return None


def check_age(value: int) -> dict | None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return _error("INVALID_AGE", "age", f"Age must be a positive integer, got {value!r}")
    return None


def check_capacity(capacity: int, member_count: int = 0) -> dict | None:
    """Capacity must hold the owner plus every non-owner member."""
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < MIN_CAPACITY:
        return _error(
            "INVALID_CAPACITY", "capacity",
            f"Capacity must be at least {MIN_CAPACITY}, got {capacity!r}",
        )
    required = member_count + 1
    if capacity < required:
        return _error(
            "CAPACITY_TOO_SMALL", "capacity",
            f"Capacity {capacity} cannot hold the owner and {member_count} member(s)",
        )
    return None


def check_can_join(capacity: int, member_count: int) -> dict | None:
    """Adding one member must keep owner + members within capacity."""
    if member_count + 2 > capacity:
        return _error(
            "CIRCLE_FULL", "members",
            f"Circle is full ({member_count + 1}/{capacity})",
        )
    return None
