"""String value types with built-in validation."""
from __future__ import annotations

from plank.core.exceptions import ValidationError, ValidationErrors
from plank.validators.base import ValidatedStr
from plank.validators.email import Email
from plank.validators.password import Password
from plank.validators.phone import Phone


def collect_errors(*values: ValidatedStr) -> ValidationErrors:
    """Validate every value and gather the failures instead of stopping at the first."""
    errors = ValidationErrors()
    for value in values:
        try:
            value.validate()
        except ValidationError as exc:
            errors.add(exc)
    return errors


__all__ = [
    "Email",
    "Password",
    "Phone",
    "ValidatedStr",
    "ValidationError",
    "ValidationErrors",
    "collect_errors",
]
