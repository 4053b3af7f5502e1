"""Error Builders

Ergonomic constructors for every violation and build error the library
produces. Message texts live here and nowhere else; they are part of the
observable contract and callers match on them verbatim.
"""
import json
from decimal import Decimal
from typing import Any

from .types import INVALID_TYPE, ErrorCode, SchemaBuildError, ValidationError


def quote(text: str) -> str:
    """Double-quote ``text`` with backslash escapes."""
    return json.dumps(text, ensure_ascii=False)


def format_value(value: Any) -> str:
    """Render a scalar the way it reads in a message: ``18``, ``0.5``, ``100``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, Decimal):
        return format(value.normalize(), "f") if value == value.to_integral_value() else str(value)
    return str(value)


def type_name(value: Any) -> str:
    return type(value).__name__


def _error(message: str, code: ErrorCode, cause: BaseException | None = None, **metadata: Any) -> ValidationError:
    return ValidationError(message, code, cause, {k: v for k, v in metadata.items() if v is not None})


# =============================================================================
# String Errors
# =============================================================================

def too_short(minimum: int, actual: int) -> ValidationError:
    return _error(f"length must be at least {minimum}", ErrorCode.E2003_OUT_OF_RANGE,
                  constraint="min_length", expected=minimum, actual=actual)


def too_long(maximum: int, actual: int) -> ValidationError:
    return _error(f"length must be at most {maximum}", ErrorCode.E2003_OUT_OF_RANGE,
                  constraint="max_length", expected=maximum, actual=actual)


def wrong_length(length: int, actual: int) -> ValidationError:
    return _error(f"length must be exactly {length}", ErrorCode.E2003_OUT_OF_RANGE,
                  constraint="length", expected=length, actual=actual)


def pattern_mismatch(pattern: str, actual: str) -> ValidationError:
    return _error(f"string must match pattern {quote(pattern)}", ErrorCode.E2002_INVALID_FORMAT,
                  constraint="pattern", expected=pattern, actual=actual)


# =============================================================================
# Number / Bool / Null Errors
# =============================================================================

def below_minimum(minimum: Any, actual: Any) -> ValidationError:
    return _error(f"value must be at least {format_value(minimum)}", ErrorCode.E2003_OUT_OF_RANGE,
                  constraint="minimum", expected=minimum, actual=actual)


def above_maximum(maximum: Any, actual: Any) -> ValidationError:
    return _error(f"value must be at most {format_value(maximum)}", ErrorCode.E2003_OUT_OF_RANGE,
                  constraint="maximum", expected=maximum, actual=actual)


def not_a_number(value: Any) -> ValidationError:
    return _error("value must be a number, got NaN", ErrorCode.E2004_INVALID_TYPE,
                  expected="numeric", actual=str(value))


def bool_must_be(expected: bool) -> ValidationError:
    return _error(f"bool value must be {format_value(expected)}", ErrorCode.E2005_CONSTRAINT_VIOLATION,
                  constraint="must_be_true" if expected else "must_be_false")


def expected_null(value: Any) -> ValidationError:
    return _error(f"expected null value, got {type_name(value)}", ErrorCode.E2004_INVALID_TYPE,
                  expected="null", actual=type_name(value))


def unexpected_type(expected: str, value: Any) -> ValidationError:
    """``expected string value, got int`` style type mismatch."""
    return _error(f"expected {expected} value, got {type_name(value)}", ErrorCode.E2004_INVALID_TYPE,
                  expected=expected, actual=type_name(value))


def fractional_integer(value: Any) -> ValidationError:
    return _error(f"expected integer value, got float with fractional part: {format_value(value)}",
                  ErrorCode.E2004_INVALID_TYPE, expected="integer", actual=value)


def numeric_overflow(message: str, value: Any) -> ValidationError:
    return _error(message, ErrorCode.E2020_NUMERIC_OVERFLOW, actual=str(value))


# =============================================================================
# Array Errors
# =============================================================================

def array_too_short(minimum: int, actual: int) -> ValidationError:
    return _error(f"array length must be at least {minimum}", ErrorCode.E2003_OUT_OF_RANGE,
                  constraint="min_items", expected=minimum, actual=actual)


def array_too_long(maximum: int, actual: int) -> ValidationError:
    return _error(f"array length must be at most {maximum}", ErrorCode.E2003_OUT_OF_RANGE,
                  constraint="max_items", expected=maximum, actual=actual)


def array_wrong_length(length: int, actual: int) -> ValidationError:
    return _error(f"array length must be exactly {length}", ErrorCode.E2003_OUT_OF_RANGE,
                  constraint="items_length", expected=length, actual=actual)


def duplicate_item(index: int) -> ValidationError:
    return _error(f"array items must be unique (duplicate found at index {index})",
                  ErrorCode.E2006_DUPLICATE_ITEM, constraint="unique_items", index=index)


def unhashable_item(index: int, cause: BaseException) -> ValidationError:
    return _error(f"failed to marshal array item for uniqueness check at index {index}: {cause}",
                  ErrorCode.E2007_UNHASHABLE_ITEM, cause, index=index)


# =============================================================================
# Composition Errors
# =============================================================================

def invalid_item(index: int, cause: BaseException) -> ValidationError:
    return _error(f"invalid item at index {index}: {cause}", ErrorCode.E2010_INVALID_ITEM, cause, index=index)


def invalid_field(name: str, cause: BaseException) -> ValidationError:
    return _error(f"validation failed for field {quote(name)}: {cause}", ErrorCode.E2011_INVALID_FIELD,
                  cause, field=name)


# =============================================================================
# Schema Build Errors (E7xxx)
# =============================================================================

def invalid_type(type_: str) -> SchemaBuildError:
    """Fresh ``invalid type`` error wrapping the INVALID_TYPE sentinel."""
    return SchemaBuildError(INVALID_TYPE.message, ErrorCode.E7001_INVALID_TYPE, INVALID_TYPE, type=type_)


def invalid_pattern(pattern: str, cause: BaseException) -> SchemaBuildError:
    return SchemaBuildError(f"invalid pattern {quote(pattern)}: {cause}", ErrorCode.E7002_INVALID_PATTERN,
                            cause, pattern=pattern)


def invalid_bound(keyword: str, raw: Any, cause: BaseException | None = None) -> SchemaBuildError:
    """Unreadable numeric bound.

    Integer schemas report ``invalid `minimum` value "x"``; number schemas
    append the parse failure: ``invalid `minimum` "x": <reason>``.
    """
    if cause is None:
        return SchemaBuildError(f"invalid `{keyword}` value {quote(str(raw))}", ErrorCode.E7003_INVALID_BOUND,
                                keyword=keyword)
    return SchemaBuildError(f"invalid `{keyword}` {quote(str(raw))}: {cause}", ErrorCode.E7003_INVALID_BOUND,
                            cause, keyword=keyword)


def invalid_property(name: str, cause: BaseException) -> SchemaBuildError:
    return SchemaBuildError(f"invalid schema for property {quote(name)}: {cause}",
                            ErrorCode.E7010_INVALID_PROPERTY, cause, property=name)


def invalid_item_schema(cause: BaseException) -> SchemaBuildError:
    return SchemaBuildError(f"invalid item schema: {cause}", ErrorCode.E7011_INVALID_ITEMS, cause)
