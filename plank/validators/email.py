from __future__ import annotations

import re

from plank.core.exceptions import ValidationError
from plank.validators.base import ValidatedStr

# local@domain.tld, each label run being alnum [alnum . -]+ alnum
_EMAIL_RE = re.compile(
    r"[A-Za-z0-9][A-Za-z0-9.\-]+[A-Za-z0-9]"
    r"@"
    r"[A-Za-z0-9][A-Za-z0-9.\-]+[A-Za-z0-9]"
    r"\.[A-Za-z]{2,6}"
)


class Email(ValidatedStr):
    """Email address.

        Email("user@example.com").ok()    # True
        Email("example.com").validate()   # raises ValidationError
    """

    def validate(self) -> None:
        if not _EMAIL_RE.fullmatch(self):
            raise ValidationError("email", "not valid email")

    def ok(self) -> bool:
        return _EMAIL_RE.fullmatch(self) is not None
