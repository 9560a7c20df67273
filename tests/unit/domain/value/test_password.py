"""Unit tests for the Password value object."""

import pytest

from accounts.domain.error import ValidationError, ValidationType
from accounts.domain.value import Password


class TestPasswordOfRaw:
    """Tests for Password.of_raw()."""

    @pytest.mark.parametrize(
        "value", ["ValidPass123!", "Aa1!aaaa", "Zz9<" + "z" * 46]
    )
    def test_valid_password(self, value):
        """Should accept passwords meeting every rule."""
        assert Password.of_raw(value).value == value

    @pytest.mark.parametrize(
        "value, requirement",
        [
            ("ValidPass!!!", "At least one digit (0-9)"),
            ("validpass123!", "At least one uppercase letter (A-Z)"),
            ("VALIDPASS123!", "At least one lowercase letter (a-z)"),
            ("ValidPass1234", 'At least one special character (!@#$%^&*(),.?":{}|<>)'),
        ],
    )
    def test_missing_character_class_fails(self, value, requirement):
        """Should name the first missing character class."""
        with pytest.raises(ValidationError) as exc_info:
            Password.of_raw(value)

        error = exc_info.value
        assert error.field == "password"
        assert error.validation_type == ValidationType.PATTERN_MISMATCH
        assert error.details["requirement"] == requirement

    def test_digit_rule_checked_before_uppercase(self):
        """Should report the digit rule when several classes are missing."""
        with pytest.raises(ValidationError) as exc_info:
            Password.of_raw("lowercase!")

        assert exc_info.value.details["requirement"] == "At least one digit (0-9)"

    def test_short_password_fails(self):
        """Should check length before character classes."""
        with pytest.raises(ValidationError) as exc_info:
            Password.of_raw("Ab1!")

        error = exc_info.value
        assert error.validation_type == ValidationType.MIN_LENGTH
        assert error.details["actual_length"] == 4
        assert error.details["missing_characters"] == 4

    def test_long_password_fails(self):
        """Should reject passwords over 50 characters."""
        with pytest.raises(ValidationError) as exc_info:
            Password.of_raw("Aa1!" + "a" * 47)

        assert exc_info.value.validation_type == ValidationType.MAX_LENGTH
        assert exc_info.value.details["excess_characters"] == 1

    def test_empty_password_fails(self):
        """Should reject an empty password with empty_check."""
        with pytest.raises(ValidationError) as exc_info:
            Password.of_raw("")

        assert exc_info.value.validation_type == ValidationType.EMPTY_CHECK

    def test_error_details_never_contain_password(self):
        """Should keep the rejected value out of the error."""
        with pytest.raises(ValidationError) as exc_info:
            Password.of_raw("validpass123!")

        error = exc_info.value
        assert "validpass123!" not in error.message
        assert "validpass123!" not in str(error.to_dict())


class TestPasswordOfHash:
    """Tests for Password.of_hash()."""

    def test_any_non_empty_hash_accepted(self):
        """Should skip the strength policy for hashes."""
        assert Password.of_hash("$2b$12$abc").value == "$2b$12$abc"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_hash_fails(self, value):
        """Should reject an empty hash."""
        with pytest.raises(ValidationError) as exc_info:
            Password.of_hash(value)

        assert exc_info.value.validation_type == ValidationType.GENERIC

    def test_str_and_repr_are_masked(self):
        """Should never reveal the wrapped value."""
        password = Password.of_raw("ValidPass123!")

        assert "ValidPass123!" not in str(password)
        assert "ValidPass123!" not in repr(password)
