"""UUID helpers used to mint and check resource identifiers."""

import uuid


def new_id() -> str:
    """Return a new random UUID4 in canonical string form."""
    return str(uuid.uuid4())


def parse_id(value: str) -> str:
    """Parse ``value`` as a UUID and return its canonical form.

    Accepts any representation ``uuid.UUID`` understands (braces,
    ``urn:uuid:`` prefix, upper case).  Raises ``ValueError`` when the
    value is not a UUID.
    """
    return str(uuid.UUID(value))


def must_parse_id(value: str) -> str:
    """Like :func:`parse_id` but for ids that are known to be valid.

    An invalid value is a programming error here, so the ``ValueError``
    is re-raised with the offending value in the message.
    """
    try:
        return parse_id(value)
    except (ValueError, TypeError, AttributeError) as exc:
        raise ValueError(f"invalid identifier {value!r}") from exc
