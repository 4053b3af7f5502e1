"""Composable Validation Schemas

Build a schema by chaining constraint calls, then validate values against it.
``validate`` returns the first violation or None; it never raises for
invalid input.

Key Features:
- Ordered predicate lists with short-circuit evaluation
- Required/absent semantics per schema kind
- Schemas are callables and compose anywhere a predicate is expected
- Composite schemas wrap inner errors with index or field context

Usage:
    import re
    from valtor.validation import ObjectSchema, StringSchema, NumberSchema, validate_field

    user = (ObjectSchema[User]()
        .field("name", validate_field(lambda u: u.name, StringSchema().min(2).max(50)))
        .field("age", validate_field(lambda u: u.age, NumberSchema[int]().min(18).max(120)))
        .field("email", validate_field(lambda u: u.email, StringSchema().regexp(re.compile(r"^.+@.+\\..+$")))))

    if (error := user.validate(candidate)) is not None:
        print(error)
"""
from .base import Predicate, Schema, TypedSchema, Validator, as_predicate, new, run_predicate
from .string import StringSchema
from .number import NumberSchema, is_number
from .boolean import BoolSchema
from .null import NullSchema
from .pointer import PointerSchema, ptr
from .array import ArraySchema, canonical_key, is_sequence
from .object import FieldValidator, FieldValidatorMap, ObjectSchema, validate_field

__all__ = [
    # Base
    "Predicate",
    "Schema",
    "TypedSchema",
    "Validator",
    "new",
    "run_predicate",
    "as_predicate",
    # Primitives
    "StringSchema",
    "NumberSchema",
    "is_number",
    "BoolSchema",
    "NullSchema",
    "PointerSchema",
    "ptr",
    # Composites
    "ArraySchema",
    "canonical_key",
    "is_sequence",
    "FieldValidator",
    "FieldValidatorMap",
    "ObjectSchema",
    "validate_field",
]
