"""Tests for the JSON Schema document model and adapter."""
import json

import pytest

from valtor import (
    INVALID_TYPE,
    VALUE_REQUIRED,
    ErrorCode,
    SchemaBuildError,
    is_error,
    is_value_required,
    parse_json_schema,
    try_parse_json_schema,
)
from valtor.jsonschema import JSONSchema


# ============================================================================
# Document model
# ============================================================================

def test_model_reads_camel_case_keywords():
    schema = JSONSchema.from_json(json.dumps({
        "type": "array",
        "minItems": 1,
        "maxItems": 3,
        "uniqueItems": True,
        "items": {"type": "string", "minLength": 2, "maxLength": 5},
        "$comment": "ignored",
    }))

    assert schema.type == "array"
    assert (schema.min_items, schema.max_items, schema.unique_items) == (1, 3, True)
    assert schema.items.min_length == 2
    assert schema.items.max_length == 5


def test_model_keeps_raw_bounds():
    schema = JSONSchema.model_validate({"type": "integer", "minimum": "10", "maximum": 1.5})
    assert schema.minimum == "10"
    assert schema.maximum == 1.5


# ============================================================================
# Object round trip
# ============================================================================

def test_valid_object(person_schema):
    schema = parse_json_schema(person_schema)

    assert schema.validate({"name": "John Doe", "age": 30, "height": 1.75, "email": "john@example.com"}) is None
    assert schema.validate({"name": "John Doe", "age": 30}) is None


def test_invalid_object(person_schema):
    schema = parse_json_schema(person_schema)

    error = schema.validate({"name": "J0hn", "age": 200})

    assert str(error) == 'validation failed for field "name": string must match pattern "^[a-zA-Z ]+$"'


def test_missing_required_property(person_schema):
    schema = parse_json_schema(person_schema)

    error = schema.validate({})
    assert str(error) == 'validation failed for field "name": value is required'
    assert error.cause is VALUE_REQUIRED
    assert is_value_required(error)

    error = schema.validate({"name": "John Doe"})
    assert str(error) == 'validation failed for field "age": value is required'


def test_required_integer_rejects_zero(person_schema):
    error = parse_json_schema(person_schema).validate({"name": "John Doe", "age": 0})
    assert is_value_required(error)


def test_property_bounds(person_schema):
    schema = parse_json_schema(person_schema)

    assert str(schema.validate({"name": "John Doe", "age": 200})) == \
        'validation failed for field "age": value must be at most 150'
    assert str(schema.validate({"name": "John Doe", "age": 30, "height": 0.2})) == \
        'validation failed for field "height": value must be at least 0.5'
    assert str(schema.validate({"name": "John Doe", "age": 30, "email": "nope"})) == \
        'validation failed for field "email": string must match pattern "^.+@.+\\\\..+$"'


def test_accepts_plain_mapping(person_document):
    schema = parse_json_schema(person_document)
    assert schema.validate({"name": "John Doe", "age": 30}) is None


def test_object_rejects_non_mapping(person_schema):
    schema = parse_json_schema(person_schema)
    assert str(schema.validate("John")) == "expected object value, got str"


def test_nested_object():
    schema = parse_json_schema({
        "type": "object",
        "properties": {
            "address": {
                "type": "object",
                "properties": {"zip": {"type": "string", "minLength": 5, "maxLength": 5}},
                "required": ["zip"],
            },
        },
    })

    assert schema.validate({"address": {"zip": "12345"}}) is None
    assert str(schema.validate({"address": {"zip": "123"}})) == \
        'validation failed for field "address": validation failed for field "zip": length must be at least 5'
    assert str(schema.validate({"address": "12345"})) == \
        'validation failed for field "address": expected object value, got str'


def test_null_property_schema_is_skipped():
    schema = parse_json_schema({"type": "object", "properties": {"a": None, "b": {"type": "integer"}}})
    assert schema.validate({"a": "anything", "b": 1}) is None


# ============================================================================
# Scalars
# ============================================================================

def test_integer_coercion():
    schema = parse_json_schema({"type": "integer", "minimum": 0, "maximum": 100})

    assert schema.validate(30) is None
    assert schema.validate(30.0) is None
    assert schema.validate(None) is None
    assert str(schema.validate(30.5)) == "expected integer value, got float with fractional part: 30.5"
    assert str(schema.validate("30")) == "expected integer value, got str"
    assert str(schema.validate(True)) == "expected integer value, got bool"
    assert str(schema.validate(2**64)) == "integer value 18446744073709551616 exceeds maximum int64"


def test_integer_decimal_bounds_round_inwards():
    schema = parse_json_schema({"type": "integer", "minimum": 1.5, "maximum": "9.5"})

    assert schema.validate(2) is None
    assert schema.validate(9) is None
    assert str(schema.validate(1)) == "value must be at least 2"
    assert str(schema.validate(10)) == "value must be at most 9"


def test_number():
    schema = parse_json_schema({"type": "number", "minimum": 0.5, "maximum": "3"})

    assert schema.validate(1.75) is None
    assert schema.validate(2) is None
    assert str(schema.validate(0)) == "value must be at least 0.5"
    assert str(schema.validate(3.5)) == "value must be at most 3"
    assert str(schema.validate("1.5")) == "expected numeric value, got str"


def test_string():
    schema = parse_json_schema({"type": "string", "minLength": 2, "pattern": "^[a-z]+$"})

    assert schema.validate("abc") is None
    assert schema.validate(None) is None
    assert str(schema.validate("a")) == "length must be at least 2"
    assert str(schema.validate("ABC")) == 'string must match pattern "^[a-z]+$"'
    assert str(schema.validate(5)) == "expected string value, got int"


def test_boolean():
    schema = parse_json_schema({"type": "object", "properties": {"ok": {"type": "boolean"}}, "required": ["ok"]})

    assert schema.validate({"ok": False}) is None
    assert str(schema.validate({})) == 'validation failed for field "ok": value is required'
    assert str(schema.validate({"ok": "yes"})) == 'validation failed for field "ok": expected boolean value, got str'


def test_null():
    schema = parse_json_schema({"type": "null"})

    assert schema.validate(None) is None
    assert str(schema.validate(1)) == "expected null value, got int"


# ============================================================================
# Arrays
# ============================================================================

def test_array():
    schema = parse_json_schema({
        "type": "array",
        "items": {"type": "integer", "minimum": 0},
        "minItems": 1,
        "uniqueItems": True,
    })

    assert schema.validate([1, 2]) is None
    assert schema.validate((1, 2)) is None
    assert str(schema.validate([])) == "array length must be at least 1"
    assert str(schema.validate([1, -1])) == "invalid item at index 1: value must be at least 0"
    assert str(schema.validate([1, 1])) == "array items must be unique (duplicate found at index 1)"
    assert str(schema.validate("abc")) == "expected array value, got str"


def test_absent_array():
    optional = parse_json_schema({"type": "array", "minItems": 1})
    assert optional.validate(None) is None

    schema = parse_json_schema({
        "type": "object",
        "properties": {"tags": {"type": "array", "minItems": 1}, "notes": {"type": "array"}},
        "required": ["tags", "notes"],
    })
    assert str(schema.validate({"notes": []})) == 'validation failed for field "tags": value is required'
    assert schema.validate({"tags": ["a"]}) is None


# ============================================================================
# Build errors
# ============================================================================

@pytest.mark.parametrize("document", [{}, {"type": ""}, {"type": "foobar"}])
def test_invalid_type(document):
    with pytest.raises(SchemaBuildError) as excinfo:
        parse_json_schema(document)

    assert excinfo.value is not INVALID_TYPE
    assert is_error(excinfo.value, INVALID_TYPE)
    assert excinfo.value.code is ErrorCode.E7001_INVALID_TYPE
    assert str(excinfo.value) == "invalid type"


def test_invalid_integer_bounds():
    with pytest.raises(SchemaBuildError, match='^invalid `minimum` value "invalid"$'):
        parse_json_schema({"type": "integer", "minimum": "invalid"})
    with pytest.raises(SchemaBuildError, match='^invalid `maximum` value "invalid"$'):
        parse_json_schema({"type": "integer", "maximum": "invalid"})


def test_invalid_number_bound():
    with pytest.raises(SchemaBuildError) as excinfo:
        parse_json_schema({"type": "number", "minimum": "abc"})

    assert str(excinfo.value).startswith('invalid `minimum` "abc": ')
    assert excinfo.value.code is ErrorCode.E7003_INVALID_BOUND
    assert isinstance(excinfo.value.cause, ValueError)


def test_invalid_pattern():
    with pytest.raises(SchemaBuildError) as excinfo:
        parse_json_schema({"type": "string", "pattern": "([a-z"})

    assert str(excinfo.value).startswith('invalid pattern "([a-z": ')
    assert excinfo.value.code is ErrorCode.E7002_INVALID_PATTERN


def test_nested_build_errors_are_wrapped():
    with pytest.raises(SchemaBuildError) as excinfo:
        parse_json_schema({"type": "object", "properties": {"a": {"type": "foo"}}})
    assert str(excinfo.value) == 'invalid schema for property "a": invalid type'
    assert is_error(excinfo.value, INVALID_TYPE)

    with pytest.raises(SchemaBuildError) as excinfo:
        parse_json_schema({"type": "array", "items": {"type": "foo"}})
    assert str(excinfo.value) == "invalid item schema: invalid type"


def test_invalid_document():
    with pytest.raises(SchemaBuildError) as excinfo:
        parse_json_schema({"type": "string", "minLength": -1})
    assert excinfo.value.code is ErrorCode.E7000_SCHEMA_GENERIC
    assert str(excinfo.value).startswith("invalid schema document: ")


def test_try_parse_json_schema():
    result = try_parse_json_schema({"type": "string"})
    assert result.is_ok()
    assert result.unwrap().validate("x") is None

    result = try_parse_json_schema({"type": "foobar"})
    assert result.is_err()
    assert is_error(result.unwrap_err(), INVALID_TYPE)


def test_invalid_type_leaves_sentinel_untouched():
    try:
        raise KeyError("earlier failure")
    except KeyError:
        with pytest.raises(SchemaBuildError):
            parse_json_schema({"type": "nope"})

    assert INVALID_TYPE.__context__ is None
    assert INVALID_TYPE.__traceback__ is None


def test_number_rejects_nan():
    schema = parse_json_schema(json.loads('{"type": "number", "minimum": 0, "maximum": 10}'))

    assert str(schema.validate(json.loads("NaN"))) == "value must be a number, got NaN"


def test_unique_items_treats_integral_floats_as_integers():
    schema = parse_json_schema({"type": "array", "uniqueItems": True})

    assert str(schema.validate(json.loads("[1, 1.0]"))) == "array items must be unique (duplicate found at index 1)"
    assert schema.validate(json.loads("[1, 1.5]")) is None
