"""Error Hierarchy: REST envelope and status mapping."""

from circles.core.errors import (
    CircleError, DataIntegrityError, ErrorCategory, NotFoundError,
    StoreError, ValidationError,
)
from circles.core.enforce_circle import check_grade


def test_all_errors_share_base():
    for err in (
        ValidationError("bad", "grade"), NotFoundError(1),
        DataIntegrityError("Owner not found", 1), StoreError("create"),
    ):
        assert isinstance(err, CircleError)


def test_status_codes():
    assert ValidationError("bad", "grade").http_status == 400
    assert NotFoundError(1).http_status == 404
    assert DataIntegrityError("x").http_status == 500
    assert StoreError("update").http_status == 503


def test_not_found_envelope():
    body = NotFoundError(7).to_response()["error"]
    assert body["code"] == "CIRCLE_NOT_FOUND"
    assert body["message"] == "Circle not found"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["context"]["circle_id"] == 7


def test_store_error_exposes_only_operation():
    err = StoreError("delete")
    assert err.message == "Database delete failed"
    assert err.to_response()["error"]["context"]["operation"] == "delete"


def test_validation_error_from_check_descriptor():
    err = ValidationError.from_check(check_grade(0))
    assert err.code == "INVALID_GRADE"
    assert err.field == "grade"
    assert err.to_response()["error"]["context"]["field"] == "grade"
