"""Validation exceptions."""
from __future__ import annotations

from typing import Optional


class ValidationError(ValueError):
    """Raised when a value fails a validation rule.

    ``errors`` lists every failed rule message; ``message`` joins them.
    """

    def __init__(
        self,
        field: str,
        message: str,
        *,
        code: Optional[str] = None,
        errors: Optional[list[str]] = None,
    ) -> None:
        self.field = field
        self.message = message
        self.code = code if code is not None else f"INVALID_{field.upper()}"
        self.errors = list(errors) if errors else [message]
        super().__init__(message)

    def to_dict(self) -> dict[str, object]:
        return {
            "field": self.field,
            "code": self.code,
            "message": self.message,
            "errors": list(self.errors),
        }


class ValidationErrors:
    """A collection of ValidationError instances."""

    def __init__(self) -> None:
        self._errors: list[ValidationError] = []

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def get_errors(self) -> list[ValidationError]:
        """Returns a copy of all collected errors."""
        return list(self._errors)

    def add(self, error: ValidationError) -> None:
        self._errors.append(error)
