"""valtor: composable data validation

Schemas are built by chaining constraint calls and then used to validate
values. Validation is fail-fast: the first violation is returned as an
error value, never raised.

Key Features:
- String, Number, Bool, Null, Pointer, Array and Object schemas
- Required/absent semantics and a VALUE_REQUIRED sentinel
- Field and index context on nested errors, with the inner error as cause
- JSON Schema documents translated into native schemas

Usage:
    import re
    from valtor import StringSchema, NumberSchema, ObjectSchema, validate_field

    schema = (ObjectSchema[User]()
        .field("name", validate_field(lambda u: u.name, StringSchema().required().min(2)))
        .field("age", validate_field(lambda u: u.age, NumberSchema[int]().min(0).max(150))))

    error = schema.validate(user)
    # validation failed for field "name": length must be at least 2

    from valtor import parse_json_schema
    schema = parse_json_schema({"type": "object", "properties": {...}, "required": [...]})
    error = schema.validate({"name": "John Doe", "age": 30})
"""
from .errors import (
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

from .validation import (
    Predicate,
    Schema,
    Validator,
    new,
    StringSchema,
    NumberSchema,
    BoolSchema,
    NullSchema,
    PointerSchema,
    ptr,
    ArraySchema,
    ObjectSchema,
    FieldValidatorMap,
    validate_field,
)

from .jsonschema import JSONSchema, parse_json_schema, try_parse_json_schema

__version__ = "0.1.0"

__all__ = [
    # Errors
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
    # Schemas
    "Predicate",
    "Schema",
    "Validator",
    "new",
    "StringSchema",
    "NumberSchema",
    "BoolSchema",
    "NullSchema",
    "PointerSchema",
    "ptr",
    "ArraySchema",
    "ObjectSchema",
    "FieldValidatorMap",
    "validate_field",
    # JSON Schema
    "JSONSchema",
    "parse_json_schema",
    "try_parse_json_schema",
]
