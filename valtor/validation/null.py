"""Null schema: accepts only ``None``.

Meant for dynamically typed values (decoded JSON, the JSON Schema adapter).
Optional typed values are PointerSchema's job.
"""
from __future__ import annotations

from typing import Any

from valtor.errors import builders

from .base import Predicate, TypedSchema


class NullSchema(TypedSchema[Any]):
    __slots__ = ()

    def custom(self, fn: Predicate[Any]) -> NullSchema:
        return self._attach(fn)

    def validate(self, value: Any) -> BaseException | None:
        if value is not None:
            return builders.expected_null(value)
        return self.schema.validate(value)
