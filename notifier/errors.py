"""Error taxonomy shared by the core and the shell."""
from __future__ import annotations


class NotifierError(Exception):
    """Base for every recoverable notifier error."""


class ValidationError(NotifierError, ValueError):
    """A required text field was empty."""


class OutOfRangeError(NotifierError, IndexError):
    """A message index is not present in the store."""


class InvalidSelectionError(NotifierError, ValueError):
    """Menu input was not an integer or not one of the allowed options."""


OutOfRange = OutOfRangeError
InvalidSelection = InvalidSelectionError


def require_text(value: str | None, field_name: str) -> str:
    """Return value unchanged; raise ValidationError if it is empty or blank."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value
