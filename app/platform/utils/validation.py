from typing import Optional

from app.platform.exceptions import ValidationError


def require_fields(message: str, *values: Optional[str]) -> None:
    """Raise ValidationError(message) unless every value is a non-empty string."""
    if any(not value for value in values):
        raise ValidationError(message)
