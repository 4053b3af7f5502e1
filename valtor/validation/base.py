"""Base Validator Engine

A schema is an ordered list of predicates. ``validate`` runs them in
attachment order and returns the first violation (short-circuit AND), or
None when every predicate passes.

Predicates are plain callables returning an error or None. A predicate may
also raise ``ValidationError``; that is treated exactly like returning it.
Every schema is itself callable, so any schema can be passed wherever a
predicate is expected:

    names = ArraySchema[str]().items(StringSchema().min(2))
"""
from __future__ import annotations

from typing import Any, Callable, Generic, Protocol, TypeVar, runtime_checkable

from valtor.errors import ValidationError

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

Predicate = Callable[[T], "BaseException | None"]


@runtime_checkable
class Validator(Protocol[T_contra]):
    """Anything exposing ``validate(value) -> error | None``."""

    def validate(self, value: T_contra) -> BaseException | None: ...


def run_predicate(predicate: Callable[[Any], BaseException | None], value: Any) -> BaseException | None:
    """Call ``predicate``; a raised ValidationError counts as a returned one."""
    try:
        return predicate(value)
    except ValidationError as e:
        return e


def as_predicate(fn: Predicate[T] | Validator[T]) -> Predicate[T]:
    """Accept a plain predicate or any Validator (its ``validate`` is used)."""
    if isinstance(fn, Validator):
        return fn.validate
    return fn


def _raisable(error: BaseException) -> BaseException:
    """Error to raise from ``check``; sentinels are never raised themselves."""
    if isinstance(error, ValidationError):
        return error.detach()
    return error


class Schema(Generic[T]):
    """Ordered predicate list shared by every schema kind."""

    __slots__ = ("_predicates",)

    def __init__(self) -> None:
        self._predicates: list[Predicate[T]] = []

    def __len__(self) -> int:
        return len(self._predicates)

    def __call__(self, value: T) -> BaseException | None:
        return self.validate(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(predicates={len(self._predicates)})"

    def custom(self, fn: Predicate[T]) -> Schema[T]:
        """Append an arbitrary predicate and return the schema for chaining."""
        self._predicates.append(fn)
        return self

    def validate(self, value: T) -> BaseException | None:
        """Run every predicate in order and return the first error, if any."""
        for predicate in self._predicates:
            if (error := run_predicate(predicate, value)) is not None:
                return error
        return None

    def is_valid(self, value: T) -> bool:
        return self.validate(value) is None

    def check(self, value: T) -> T:
        """Raising variant of ``validate``. Returns ``value`` when valid."""
        if (error := self.validate(value)) is not None:
            raise _raisable(error)
        return value


def new() -> Schema[Any]:
    """Create an empty schema."""
    return Schema()


class TypedSchema(Generic[T]):
    """Wrapper owning a base ``Schema``.

    Subclasses intercept ``validate`` to apply type and required semantics,
    then delegate to ``self.schema``.
    """

    __slots__ = ("schema",)

    def __init__(self) -> None:
        self.schema: Schema[T] = Schema()

    def __len__(self) -> int:
        return len(self.schema)

    def __call__(self, value: Any) -> BaseException | None:
        return self.validate(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(predicates={len(self.schema)})"

    def _attach(self, fn: Predicate[T]):
        self.schema.custom(fn)
        return self

    def custom(self, fn: Predicate[T]):
        """Append an arbitrary predicate and return the schema for chaining."""
        return self._attach(fn)

    def validate(self, value: Any) -> BaseException | None:
        return self.schema.validate(value)

    def is_valid(self, value: Any) -> bool:
        return self.validate(value) is None

    def check(self, value: Any) -> Any:
        """Raising variant of ``validate``. Returns ``value`` when valid."""
        if (error := self.validate(value)) is not None:
            raise _raisable(error)
        return value
