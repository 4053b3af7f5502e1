"""Explicit Numeric Coercion

Decoded JSON (and hand-built dicts) carry numbers in many representations.
Each coercion maps every accepted representation to the one canonical form
the schema validates against, and returns a Result instead of raising:

    integer: int (any Integral)      -> int64, range-checked
             float / Decimal / Fraction -> int64 when integral and in range
             None                    -> 0
    number:  any real number         -> float
             None                    -> 0.0

``bool`` is never a number here, even though it subclasses ``int``.
"""
from __future__ import annotations

import math
import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Any

from valtor.errors import Err, Ok, Result, ValidationError
from valtor.errors import builders
from valtor.logging import adapter_logger

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)

log = adapter_logger()


def to_int64(value: Any) -> Result[int, ValidationError]:
    """Widen ``value`` to a signed 64-bit integer."""
    match value:
        case None:
            return Ok(0)
        case bool():
            return Err(builders.unexpected_type("integer", value))
        case numbers.Integral():
            n = int(value)
            if n > INT64_MAX:
                return Err(builders.numeric_overflow(f"integer value {n} exceeds maximum int64", n))
            if n < INT64_MIN:
                return Err(builders.numeric_overflow(f"integer value {n} exceeds minimum int64", n))
            return Ok(n)
        case float() | Decimal() | Fraction():
            if isinstance(value, (float, Decimal)) and value != value:
                return Err(builders.fractional_integer(value))
            if (isinstance(value, float) and math.isinf(value)) or (isinstance(value, Decimal) and value.is_infinite()):
                return Err(builders.numeric_overflow(f"float value {builders.format_value(value)} exceeds int64 range", value))
            if value != math.trunc(value):
                return Err(builders.fractional_integer(value))
            if value > INT64_MAX or value < INT64_MIN:
                return Err(builders.numeric_overflow(f"float value {builders.format_value(value)} exceeds int64 range", value))
            return Ok(int(value))
        case _:
            log.debug("integer_coercion_rejected", got=builders.type_name(value))
            return Err(builders.unexpected_type("integer", value))


def to_float64(value: Any) -> Result[float, ValidationError]:
    """Widen ``value`` to a float."""
    match value:
        case None:
            return Ok(0.0)
        case bool():
            return Err(builders.unexpected_type("numeric", value))
        case numbers.Real() | Decimal():
            try:
                return Ok(float(value))
            except OverflowError:
                return Err(builders.numeric_overflow(f"numeric value {value} exceeds float range", value))
        case _:
            log.debug("number_coercion_rejected", got=builders.type_name(value))
            return Err(builders.unexpected_type("numeric", value))
