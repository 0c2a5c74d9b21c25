"""
Validation rules for user fields.

The email check is deliberately looser than RFC 5322: it only asks
for a single ``@`` with text on both sides and a dot somewhere in the
domain part that is not the final character.
"""

from .errors import ValidationError


def is_valid_email(email: str) -> bool:
    """Return ``True`` if ``email`` passes the minimal structural check."""
    if email.count("@") != 1:
        return False
    at_index = email.index("@")
    if at_index == 0 or at_index == len(email) - 1:
        return False
    # A dot strictly after the @ and strictly before the last character.
    return "." in email[at_index + 1:-1]


def validate_user_fields(name: str, email: str) -> None:
    """Raise ``ValidationError`` for the first invalid field.

    Name is checked before email, so a record with both fields wrong
    reports ``name``.
    """
    if not name:
        raise ValidationError("name", "name cannot be empty")
    if not email:
        raise ValidationError("email", "email cannot be empty")
    if not is_valid_email(email):
        raise ValidationError("email", "email format is invalid")
