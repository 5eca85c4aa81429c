from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class ValidatedStr(str, metaclass=ABCMeta):
    """Abstract base for string value types that know how to validate themselves.

    Subclasses implement ``validate`` (raise ``ValidationError`` on failure).
    Instances are also usable as pydantic field types.
    """

    @abstractmethod
    def validate(self) -> None:
        ...

    def ok(self) -> bool:
        try:
            self.validate()
        except ValueError:
            return False
        return True

    @classmethod
    def parse(cls, value: str) -> "ValidatedStr":
        instance = cls(value)
        instance.validate()
        return instance

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls.parse, core_schema.str_schema()
        )
