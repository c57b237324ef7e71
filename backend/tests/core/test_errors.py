"""Error hierarchy — status codes, categories, and the REST envelope."""

from attendance_api.core.errors import (
    AttendanceError, DatabaseError, ErrorCategory, ErrorContext,
    InvalidInputError, OperationFailedError, ResourceNotFoundError,
)


def test_invalid_input_is_400_validation():
    err = InvalidInputError("CSV file is required", "file")
    assert err.http_status == 400
    assert err.code == "VALIDATION_ERROR"
    assert err.category is ErrorCategory.VALIDATION
    assert err.field == "file"


def test_not_found_message_names_resource():
    err = ResourceNotFoundError("Class", "7", ErrorContext(class_id=7))
    assert err.http_status == 404
    assert err.message == "Class not found"
    assert err.resource_id == "7"
    assert err.context.class_id == 7


def test_infrastructure_errors_are_500():
    assert DatabaseError("boom", "commit").http_status == 500
    assert OperationFailedError("Failed to import users").http_status == 500


def test_all_errors_share_base():
    for err in (
        InvalidInputError("x", "f"),
        ResourceNotFoundError("Class", "1"),
        DatabaseError("x", "query"),
        OperationFailedError("x"),
    ):
        assert isinstance(err, AttendanceError)


def test_to_response_envelope():
    body = OperationFailedError("Failed to mark attendance").to_response()
    error = body["error"]
    assert error["code"] == "OPERATION_FAILED"
    assert error["message"] == "Failed to mark attendance"
    assert error["category"] == "internal"
    assert error["severity"] == "critical"
    assert "timestamp" in error
