"""Unit tests for domain error factories."""

from datetime import datetime
from uuid import uuid4

from accounts.domain import error
from accounts.domain.error import ErrorKind, InvalidStateError, ValidationType


class TestValidationFactories:
    """Tests for the value object error factories."""

    def test_empty_field(self):
        err = error.empty_field("name")

        assert err.kind == ErrorKind.VALIDATION
        assert err.field == "name"
        assert err.message == "name cannot be empty"
        assert err.validation_type == ValidationType.EMPTY_CHECK
        assert isinstance(err.details["timestamp"], datetime)

    def test_min_length(self):
        err = error.min_length("password", 8, 5)

        assert err.details["min_length"] == 8
        assert err.details["actual_length"] == 5
        assert err.details["missing_characters"] == 3

    def test_max_length(self):
        err = error.max_length("name", 100, 120)

        assert err.details["max_length"] == 100
        assert err.details["excess_characters"] == 20

    def test_invalid_pattern(self):
        err = error.invalid_pattern("email", "^x$", "Invalid email format")

        assert err.validation_type == ValidationType.PATTERN_MISMATCH
        assert err.details["pattern"] == "^x$"
        assert err.details["requirement"] == "Invalid email format"

    def test_timestamps_are_timezone_aware(self):
        err = error.invalid("page", "Page number cannot be negative")

        assert err.details["timestamp"].tzinfo is not None


class TestInvalidState:
    """Tests for InvalidStateError."""

    def test_message_names_action_and_state(self):
        err = error.invalid_state("User", "Active", "activate")

        assert isinstance(err, InvalidStateError)
        assert err.kind == ErrorKind.INVALID_STATE
        assert err.message == (
            "It is not possible to execute 'activate' on User in the 'Active' state"
        )
        assert err.entity_name == "User"
        assert err.current_state == "Active"
        assert err.action == "activate"

    def test_entity_id_recorded_when_given(self):
        user_id = uuid4()

        err = error.invalid_state("User", "Blocked", "block", user_id)

        assert err.details["entity_id"] == str(user_id)
        assert "entity_id" not in error.invalid_state("User", "Active", "x").details


class TestDomainError:
    """Tests for the shared error shape."""

    def test_add_detail_and_to_dict(self):
        err = error.invalid("order_by", "Cannot sort")

        err.add_detail("requested", "age")
        data = err.to_dict()

        assert data["kind"] == "validation"
        assert data["message"] == "Cannot sort"
        assert data["details"]["requested"] == "age"

    def test_details_are_copied(self):
        details = {"a": 1}
        err = error.ValidationError("boom", "field", details)

        err.add_detail("b", 2)

        assert details == {"a": 1}
