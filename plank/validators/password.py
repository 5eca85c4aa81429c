"""
Password strength rules.

A password must contain at least one character from each of four classes:
uppercase, lowercase, punctuation and digit (ASCII). ``validate`` reports
every missing class, in that order, on a single ``ValidationError``.
"""
from __future__ import annotations

import re
import string

from plank.core.exceptions import ValidationError
from plank.validators.base import ValidatedStr

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_PUNCT_RE = re.compile(f"[{re.escape(string.punctuation)}]")
_DIGIT_RE = re.compile(r"[0-9]")

PASSWORD_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (_UPPER_RE, "password should contain one or more uppercase character"),
    (_LOWER_RE, "password should contain one or more lowercase character"),
    (_PUNCT_RE, "password should contain one or more special character"),
    (_DIGIT_RE, "password should contain one or more digit character"),
)


class Password(ValidatedStr):
    """Password value.

        Password("5uperP@ssw0rd").ok()   # True
        Password("password").validate()  # raises ValidationError
    """

    def __repr__(self) -> str:
        return "Password('**********')"

    def failed_rules(self) -> list[str]:
        return [message for pattern, message in PASSWORD_RULES if not pattern.search(self)]

    def validate(self) -> None:
        failed = self.failed_rules()
        if failed:
            raise ValidationError(
                "password", "; ".join(failed), code="WEAK_PASSWORD", errors=failed
            )

    def ok(self) -> bool:
        return all(pattern.search(self) for pattern, _ in PASSWORD_RULES)
