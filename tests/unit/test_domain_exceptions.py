import pytest

from lawdesk.domain.exceptions import (
    AuthenticationException,
    ConflictException,
    InvalidTokenException,
    LawdeskException,
    ResourceNotFoundException,
    ValidationException,
)
from lawdesk.domain.value_objects import FirmScope
from lawdesk.infrastructure.exceptions import DocumentExistsError, DocumentStoreException


def test_error_codes() -> None:
    assert ValidationException("bad").error_code == "VALIDATION_ERROR"
    assert ConflictException("taken").error_code == "CONFLICT"
    assert AuthenticationException().error_code == "AUTHENTICATION_ERROR"
    assert InvalidTokenException().error_code == "INVALID_TOKEN"
    assert ResourceNotFoundException("gone").error_code == "RESOURCE_NOT_FOUND"
    assert DocumentExistsError("x/y").error_code == "DOCUMENT_STORE_ERROR"


def test_to_dict_includes_field_when_known() -> None:
    assert ValidationException("Title is required", field="title").to_dict() == {
        "error": "Title is required",
        "field": "title",
    }
    assert ConflictException("taken").to_dict() == {"error": "taken"}


def test_not_found_does_not_leak_resource_type() -> None:
    exc = ResourceNotFoundException("Case not found", resource_type="case")
    assert exc.details == {"resource_type": "case"}
    assert exc.to_dict() == {"error": "Case not found"}


def test_hierarchy() -> None:
    assert issubclass(DocumentStoreException, LawdeskException)
    assert str(AuthenticationException()) == "Invalid credentials"


def test_firm_scope_requires_firm_id() -> None:
    with pytest.raises(ValueError):
        FirmScope("")
    assert FirmScope("f1").user_id is None
