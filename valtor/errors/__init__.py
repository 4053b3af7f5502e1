"""Error Handling System

Violations are returned, not raised: ``schema.validate(value)`` yields an
error instance or None. Composite schemas wrap inner errors with context and
keep the inner error as ``cause``.

Usage:
    from valtor.errors import VALUE_REQUIRED, is_value_required

    err = schema.validate(payload)
    if err is VALUE_REQUIRED:
        ...
    elif is_value_required(err):  # wrapped by an object or array schema
        ...
"""
from .types import (
    ErrorCode,
    ValidationError,
    ValueRequiredError,
    SchemaBuildError,
    VALUE_REQUIRED,
    INVALID_TYPE,
    is_value_required,
    is_error,
    Result,
    Ok,
    Err,
)

from . import builders

__all__ = [
    "ErrorCode",
    "ValidationError",
    "ValueRequiredError",
    "SchemaBuildError",
    "VALUE_REQUIRED",
    "INVALID_TYPE",
    "is_value_required",
    "is_error",
    "Result",
    "Ok",
    "Err",
    "builders",
]
