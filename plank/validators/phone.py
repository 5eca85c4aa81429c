from __future__ import annotations

import re

from plank.core.exceptions import ValidationError
from plank.validators.base import ValidatedStr

_PHONE_RE = re.compile(r"[0-9]+")


class Phone(ValidatedStr):
    """Phone number made of ASCII digits only, e.g. ``Phone("0123456789")``."""

    def validate(self) -> None:
        if not _PHONE_RE.fullmatch(self):
            raise ValidationError("phone", "not valid phone number")

    def ok(self) -> bool:
        return _PHONE_RE.fullmatch(self) is not None
