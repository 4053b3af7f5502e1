"""Array schema: homogeneous sequences.

Length bounds, uniqueness and item validation are ordinary predicates on
the same ordered list, so they run in the order they were attached.
``None`` is validated as an empty sequence: ``min(1)`` still reports the
length violation, while a schema without a length floor accepts it.
"""
from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic_core import to_jsonable_python

from valtor.errors import builders

from .base import Predicate, TypedSchema, Validator, as_predicate, run_predicate

T = TypeVar("T")

_EMPTY: tuple = ()


def _normalize(item: Any) -> Any:
    """Collapse integral floats to ints so ``1`` and ``1.0`` compare equal, as in JSON."""
    match item:
        case bool():
            return item
        case float() if item.is_integer():
            return int(item)
        case Mapping():
            return {k: _normalize(v) for k, v in item.items()}
        case list() | tuple():
            return [_normalize(v) for v in item]
        case _:
            return item


def canonical_key(item: Any) -> str:
    """Deterministic JSON text for ``item`` (sorted keys, compact separators).

    Integral floats inside plain containers render as integers. Dataclasses,
    pydantic models, datetimes, UUIDs and sets go through pydantic-core's
    JSON-able conversion.
    """
    return json.dumps(_normalize(item), sort_keys=True, separators=(",", ":"), default=to_jsonable_python)


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


class ArraySchema(TypedSchema[Sequence[T]]):
    __slots__ = ("_item_validator",)

    def __init__(self) -> None:
        super().__init__()
        self._item_validator: Predicate[T] | Validator[T] | None = None

    @property
    def item_validator(self) -> Predicate[T] | Validator[T] | None:
        """The validator most recently installed by ``items()``."""
        return self._item_validator

    def items(self, validator: Predicate[T] | Validator[T]) -> ArraySchema[T]:
        """Validate every item, failing at the first bad index.

        ``validator`` is a predicate or any object with ``validate(value)``;
        schemas qualify either way.
        """
        self._item_validator = validator
        predicate = as_predicate(validator)

        def check_items(arr: Sequence[T]):
            for i, item in enumerate(arr):
                if (error := run_predicate(predicate, item)) is not None:
                    return builders.invalid_item(i, error)
            return None
        return self._attach(check_items)

    def min(self, minimum: int) -> ArraySchema[T]:
        def check_min(arr: Sequence[T]):
            if len(arr) < minimum:
                return builders.array_too_short(minimum, len(arr))
            return None
        return self._attach(check_min)

    def max(self, maximum: int) -> ArraySchema[T]:
        def check_max(arr: Sequence[T]):
            if len(arr) > maximum:
                return builders.array_too_long(maximum, len(arr))
            return None
        return self._attach(check_max)

    def length(self, length: int) -> ArraySchema[T]:
        def check_length(arr: Sequence[T]):
            if len(arr) != length:
                return builders.array_wrong_length(length, len(arr))
            return None
        return self._attach(check_length)

    def unique_items(self) -> ArraySchema[T]:
        """Fail at the first item whose canonical JSON text was already seen."""
        def check_unique(arr: Sequence[T]):
            seen: set[str] = set()
            for i, item in enumerate(arr):
                try:
                    key = canonical_key(item)
                except (TypeError, ValueError) as e:
                    return builders.unhashable_item(i, e)
                if key in seen:
                    return builders.duplicate_item(i)
                seen.add(key)
            return None
        return self._attach(check_unique)

    def custom(self, fn: Predicate[Sequence[T]]) -> ArraySchema[T]:
        return self._attach(fn)

    def validate(self, value: Any) -> BaseException | None:
        if value is None:
            value = _EMPTY
        elif not is_sequence(value):
            return builders.unexpected_type("array", value)
        return self.schema.validate(value)
