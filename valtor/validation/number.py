"""Number schema, generic over any ordered numeric representation.

``NumberSchema[int]``, ``NumberSchema[float]``, ``NumberSchema[Decimal]``...
Bounds compare with the representation's native ordering; nothing is
rounded or promoted inside the schema.

``required()`` treats the zero value as absent. Zero fails even when it is a
meaningful value for the caller; use ``ptr(NumberSchema())`` when absence
and zero must be told apart.
"""
from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import Any, TypeVar

from valtor.errors import VALUE_REQUIRED
from valtor.errors import builders

from .base import Predicate, TypedSchema

N = TypeVar("N", int, float, Decimal, numbers.Real)


def is_number(value: Any) -> bool:
    """True for real numbers, excluding ``bool``."""
    return not isinstance(value, bool) and isinstance(value, (numbers.Real, Decimal))


def is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


class NumberSchema(TypedSchema[N]):
    """Validation schema for numeric values.

    ``None`` is validated as ``0``. NaN is rejected before any bound runs,
    since it compares false against every bound.
    """

    __slots__ = ("_required",)

    def __init__(self) -> None:
        super().__init__()
        self._required = False

    @property
    def is_required(self) -> bool:
        return self._required

    def required(self) -> NumberSchema[N]:
        """Fail the zero value with VALUE_REQUIRED before any other predicate runs."""
        self._required = True
        return self

    def min(self, minimum: N) -> NumberSchema[N]:
        def check_min(v: N):
            if v < minimum:
                return builders.below_minimum(minimum, v)
            return None
        return self._attach(check_min)

    def max(self, maximum: N) -> NumberSchema[N]:
        def check_max(v: N):
            if v > maximum:
                return builders.above_maximum(maximum, v)
            return None
        return self._attach(check_max)

    def custom(self, fn: Predicate[N]) -> NumberSchema[N]:
        return self._attach(fn)

    def validate(self, value: Any) -> BaseException | None:
        if value is None:
            value = 0
        elif not is_number(value):
            return builders.unexpected_type("numeric", value)
        elif is_nan(value):
            return builders.not_a_number(value)
        if value == 0 and self._required:
            return VALUE_REQUIRED
        return self.schema.validate(value)
