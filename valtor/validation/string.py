"""String schema: length bounds, pattern and required-ness."""
from __future__ import annotations

import re
from typing import Any

from valtor.errors import VALUE_REQUIRED
from valtor.errors import builders

from .base import Predicate, TypedSchema


class StringSchema(TypedSchema[str]):
    """Validation schema for ``str`` values.

    ``None`` is the absent marker and is validated as ``""``.
    """

    __slots__ = ("_required",)

    def __init__(self) -> None:
        super().__init__()
        self._required = False

    @property
    def is_required(self) -> bool:
        return self._required

    def required(self) -> StringSchema:
        """Fail empty strings with VALUE_REQUIRED before any other predicate runs."""
        self._required = True
        return self

    def min(self, minimum: int) -> StringSchema:
        def check_min(v: str):
            if len(v) < minimum:
                return builders.too_short(minimum, len(v))
            return None
        return self._attach(check_min)

    def max(self, maximum: int) -> StringSchema:
        def check_max(v: str):
            if len(v) > maximum:
                return builders.too_long(maximum, len(v))
            return None
        return self._attach(check_max)

    def length(self, length: int) -> StringSchema:
        def check_length(v: str):
            if len(v) != length:
                return builders.wrong_length(length, len(v))
            return None
        return self._attach(check_length)

    def regexp(self, pattern: re.Pattern[str]) -> StringSchema:
        """Require ``pattern`` to match somewhere in the value.

        The pattern is compiled by the caller; anchor it (``^...$``) to match
        the whole string.
        """
        def check_pattern(v: str):
            if pattern.search(v) is None:
                return builders.pattern_mismatch(pattern.pattern, v)
            return None
        return self._attach(check_pattern)

    def custom(self, fn: Predicate[str]) -> StringSchema:
        return self._attach(fn)

    def validate(self, value: Any) -> BaseException | None:
        if value is None:
            value = ""
        elif not isinstance(value, str):
            return builders.unexpected_type("string", value)
        if value == "" and self._required:
            return VALUE_REQUIRED
        return self.schema.validate(value)
