"""
Unit tests for user field validation.
"""

import pytest

from user_service_api.app.core.errors import VALIDATION_ERROR, ValidationError
from user_service_api.app.core.validation import is_valid_email, validate_user_fields


@pytest.mark.parametrize(
    "email, expected",
    [
        ("test@example.com", True),
        ("user@mail.example.com", True),
        ("a@b.c", True),
        ("a@.b", True),
        ("testexample.com", False),
        ("test@@example.com", False),
        ("te@st@example.com", False),
        ("test@", False),
        ("@example.com", False),
        ("test@example", False),
        ("test@example.", False),
        ("test.name@example", False),
        ("", False),
        ("invalid-email", False),
    ],
)
def test_is_valid_email(email, expected):
    assert is_valid_email(email) is expected


class TestValidateUserFields:
    """Tests for validate_user_fields."""

    def test_valid_fields(self):
        validate_user_fields("John Doe", "john@example.com")

    def test_empty_name(self):
        with pytest.raises(ValidationError) as info:
            validate_user_fields("", "john@example.com")
        assert info.value.field == "name"
        assert info.value.type == VALIDATION_ERROR

    def test_empty_email(self):
        with pytest.raises(ValidationError) as info:
            validate_user_fields("John Doe", "")
        assert info.value.field == "email"
        assert info.value.message == "email cannot be empty"

    def test_malformed_email(self):
        with pytest.raises(ValidationError) as info:
            validate_user_fields("John Doe", "invalid-email")
        assert info.value.field == "email"
        assert info.value.message == "email format is invalid"

    def test_name_is_reported_first(self):
        with pytest.raises(ValidationError) as info:
            validate_user_fields("", "invalid-email")
        assert info.value.field == "name"
