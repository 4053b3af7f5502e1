"""Optional-value schema.

``None`` is absent, anything else is present. ``ptr(inner)`` wraps an
existing validator by reference: a present value is handed to
``inner.validate``, absence is allowed unless ``required()`` is layered on
top. The inner schema is not copied, so constraints added to it later are
honoured.

    nickname = ptr(StringSchema().min(3))
    nickname.validate("hi")   # length must be at least 3
    nickname.validate(None)   # None
    nickname.required().validate(None)  # VALUE_REQUIRED
"""
from __future__ import annotations

from typing import Any, TypeVar

from valtor.errors import VALUE_REQUIRED

from .base import Predicate, TypedSchema, Validator

T = TypeVar("T")


class PointerSchema(TypedSchema[T | None]):
    __slots__ = ("_required",)

    def __init__(self) -> None:
        super().__init__()
        self._required = False

    @property
    def is_required(self) -> bool:
        return self._required

    def required(self) -> PointerSchema[T]:
        """Fail ``None`` with VALUE_REQUIRED."""
        self._required = True
        return self

    def not_nil(self) -> PointerSchema[T]:
        """Alias for ``required()``."""
        return self.required()

    def custom(self, fn: Predicate[T | None]) -> PointerSchema[T]:
        """Append a predicate. It receives ``None`` for absent values."""
        return self._attach(fn)

    def validate(self, value: Any) -> BaseException | None:
        if value is None and self._required:
            return VALUE_REQUIRED
        return self.schema.validate(value)


def ptr(inner: Validator[T]) -> PointerSchema[T]:
    """Wrap ``inner`` so present values are validated by it and ``None`` passes."""
    schema: PointerSchema[T] = PointerSchema()

    def delegate(value: T | None):
        if value is None:
            return None
        return inner.validate(value)

    return schema.custom(delegate)
