"""Validation Error Types

Violations are values, not crashes: every schema returns an error instance
(or None) from ``validate``. Errors carry a complete human-readable message,
a code from the taxonomy below, and an optional cause so composite schemas
can wrap inner failures without losing them.

Key components:
- ErrorCode: hierarchical code taxonomy (E2xxx validation, E7xxx schema build)
- ValidationError: base violation, chainable through ``cause``
- VALUE_REQUIRED: distinguished sentinel, matchable by identity
- SchemaBuildError / INVALID_TYPE: JSON Schema translation failures
- Result[T, E]: Ok/Err container for fallible conversions
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Generic, Iterator, NoReturn, TypeVar, Union, final

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E2xxx: Validation errors (returned by ``validate``)
    E7xxx: Schema build errors (raised while translating JSON Schema)
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2001_REQUIRED_FIELD_MISSING = 2001
    E2002_INVALID_FORMAT = 2002
    E2003_OUT_OF_RANGE = 2003
    E2004_INVALID_TYPE = 2004
    E2005_CONSTRAINT_VIOLATION = 2005
    E2006_DUPLICATE_ITEM = 2006
    E2007_UNHASHABLE_ITEM = 2007
    E2010_INVALID_ITEM = 2010
    E2011_INVALID_FIELD = 2011
    E2020_NUMERIC_OVERFLOW = 2020

    # Schema build (E7xxx)
    E7000_SCHEMA_GENERIC = 7000
    E7001_INVALID_TYPE = 7001
    E7002_INVALID_PATTERN = 7002
    E7003_INVALID_BOUND = 7003
    E7010_INVALID_PROPERTY = 7010
    E7011_INVALID_ITEMS = 7011

    @property
    def category(self) -> str:
        """Human-readable error category."""
        code = self.value
        if 2000 <= code < 3000:
            return "validation"
        if 7000 <= code < 8000:
            return "schema"
        return "internal"

    @property
    def is_composite(self) -> bool:
        """Whether errors with this code wrap an inner error."""
        return self in (ErrorCode.E2010_INVALID_ITEM, ErrorCode.E2011_INVALID_FIELD,
                        ErrorCode.E7010_INVALID_PROPERTY, ErrorCode.E7011_INVALID_ITEMS)


@dataclass(eq=False)
class ValidationError(Exception):
    """A single violation with optional wrapped cause.

    The message is final: composite schemas build the full text
    (``invalid item at index 1: length must be at least 3``) when wrapping,
    so ``str(error)`` is always what the caller should show.
    """
    message: str
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC
    cause: BaseException | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        super().__init__(self.message)
        if self.cause is not None:
            self.__cause__ = self.cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code.name})"

    def unwrap(self) -> BaseException | None:
        """Return the wrapped inner error, if any."""
        return self.cause

    def chain(self) -> Iterator[BaseException]:
        """Iterate this error followed by every wrapped cause, outermost first."""
        current: BaseException | None = self
        while current is not None:
            yield current
            current = current.cause if isinstance(current, ValidationError) else current.__cause__

    def root_cause(self) -> BaseException:
        """Innermost error of the chain."""
        *_, last = self.chain()
        return last

    @property
    def is_sentinel(self) -> bool:
        """True for the shared, read-only instances (VALUE_REQUIRED, INVALID_TYPE)."""
        return isinstance(self.metadata, MappingProxyType)

    def detach(self) -> ValidationError:
        """Return an error that is safe to raise or modify.

        Sentinels come back as a fresh copy wrapping the sentinel as ``cause``,
        so ``is_error``/``is_value_required`` still match. Other errors are
        returned as is.
        """
        if not self.is_sentinel:
            return self
        if isinstance(self, SchemaBuildError):
            return SchemaBuildError(self.message, self.code, self)
        return ValidationError(self.message, self.code, self)

    def with_metadata(self, **kwargs: Any) -> ValidationError:
        """Attach extra metadata and return the error for chaining.

        Updates in place, except on a sentinel, which is never modified: the
        metadata goes on a detached copy instead.
        """
        error = self.detach()
        error.metadata.update(kwargs)
        return error

    def to_dict(self, *, max_value_length: int | None = None) -> dict[str, Any]:
        """Serialize for logs and API responses."""
        if max_value_length is None:
            from valtor.config import get_settings
            max_value_length = get_settings().MAX_ERROR_VALUE_LENGTH

        metadata = {k: _truncate(v, max_value_length) for k, v in self.metadata.items()}
        result: dict[str, Any] = {"message": self.message, "code": self.code.name,
                                  "category": self.code.category}
        if metadata:
            result["metadata"] = metadata
        if self.cause is not None:
            result["cause"] = (self.cause.to_dict(max_value_length=max_value_length)
                               if isinstance(self.cause, ValidationError) else {"message": str(self.cause)})
        return result


def _freeze(error: ValidationError) -> ValidationError:
    error.metadata = MappingProxyType({})
    return error


def _truncate(value: Any, limit: int) -> Any:
    if isinstance(value, str) and len(value) > limit:
        return value[:limit] + "..."
    return value


class ValueRequiredError(ValidationError):
    """Raised (returned) when a required value is absent, empty or zero."""

    def __init__(self, message: str = "value is required"):
        super().__init__(message, ErrorCode.E2001_REQUIRED_FIELD_MISSING)


VALUE_REQUIRED = _freeze(ValueRequiredError())


class SchemaBuildError(ValidationError):
    """JSON Schema translation failure. Never produced by ``validate``."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.E7000_SCHEMA_GENERIC,
                 cause: BaseException | None = None, **metadata: Any):
        super().__init__(message, code, cause, metadata)


INVALID_TYPE = _freeze(SchemaBuildError("invalid type", ErrorCode.E7001_INVALID_TYPE))


def is_value_required(error: BaseException | None) -> bool:
    """Check whether ``error`` is, or wraps, the VALUE_REQUIRED sentinel."""
    if error is None:
        return False
    if isinstance(error, ValidationError):
        return any(e is VALUE_REQUIRED for e in error.chain())
    return False


def is_error(error: BaseException | None, target: BaseException) -> bool:
    """Identity match against ``target`` anywhere in the cause chain."""
    if error is None:
        return False
    if isinstance(error, ValidationError):
        return any(e is target for e in error.chain())
    return error is target


# ============================================================================
# Result container
# ============================================================================

@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, Exception]:
        return Ok(f(self.value))

    def and_then(self, f: Callable[[T], Result[U, Exception]]) -> Result[U, Exception]:
        return f(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result. Wraps the error instance."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[[Any], U]) -> Err[E]:
        return self

    def and_then(self, f: Callable[[Any], Any]) -> Err[E]:
        return self


Result = Union[Ok[T], Err[E]]
