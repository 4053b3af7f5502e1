"""Boolean schema."""
from __future__ import annotations

from typing import Any

from valtor.errors import builders

from .base import Predicate, TypedSchema


class BoolSchema(TypedSchema[bool]):
    """Validation schema for ``bool`` values.

    There is no required flag: a boolean is always present. ``None`` is
    validated as ``False``.
    """

    __slots__ = ()

    def must_be_true(self) -> BoolSchema:
        def check_true(v: bool):
            return None if v else builders.bool_must_be(True)
        return self._attach(check_true)

    def must_be_false(self) -> BoolSchema:
        def check_false(v: bool):
            return builders.bool_must_be(False) if v else None
        return self._attach(check_false)

    def custom(self, fn: Predicate[bool]) -> BoolSchema:
        return self._attach(fn)

    def validate(self, value: Any) -> BaseException | None:
        if value is None:
            value = False
        elif not isinstance(value, bool):
            return builders.unexpected_type("boolean", value)
        return self.schema.validate(value)
