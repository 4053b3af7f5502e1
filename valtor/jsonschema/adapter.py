"""JSON Schema Adapter

One-shot, recursive translation of a parsed JSON Schema document into a tree
of valtor schemas. The result is an ordinary ``Schema[Any]`` that validates
dynamically typed values (decoded JSON, plain dicts and lists).

Every node is wrapped behind a predicate that accepts the declared type's
natural representation plus every reasonably coercible one (see
``coercion``), and decides how ``None`` is treated from the node's required
flag.

Build failures raise ``SchemaBuildError`` and abort the whole translation;
no partial schema is returned.

Usage:
    from valtor.jsonschema import JSONSchema, parse_json_schema

    schema = parse_json_schema(JSONSchema.from_json(document))
    error = schema.validate({"name": "John Doe", "age": 30})
"""
from __future__ import annotations

import math
import re
from collections.abc import Mapping
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal, InvalidOperation
from typing import Any, Callable

import pydantic

from valtor.errors import (
    VALUE_REQUIRED,
    Err,
    ErrorCode,
    Ok,
    Result,
    SchemaBuildError,
)
from valtor.errors import builders
from valtor.logging import adapter_logger
from valtor.validation import (
    ArraySchema,
    BoolSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    StringSchema,
    is_sequence,
    new,
)

from .coercion import to_float64, to_int64
from .model import JSONSchema

log = adapter_logger()


def parse_json_schema(schema: JSONSchema | Mapping[str, Any]) -> Schema[Any]:
    """Translate ``schema`` into a validator tree. Raises SchemaBuildError."""
    if not isinstance(schema, JSONSchema):
        try:
            schema = JSONSchema.model_validate(schema)
        except pydantic.ValidationError as e:
            raise SchemaBuildError(f"invalid schema document: {e}", ErrorCode.E7000_SCHEMA_GENERIC, e) from e

    try:
        result = _parse(schema, required=False)
    except SchemaBuildError as e:
        log.warning("json_schema_build_failed", error=str(e), code=e.code.name)
        raise
    log.debug("json_schema_built", type=schema.type, properties=len(schema.properties))
    return result


def try_parse_json_schema(schema: JSONSchema | Mapping[str, Any]) -> Result[Schema[Any], SchemaBuildError]:
    """Result-returning variant of ``parse_json_schema``."""
    try:
        return Ok(parse_json_schema(schema))
    except SchemaBuildError as e:
        return Err(e)


def _parse(schema: JSONSchema, required: bool) -> Schema[Any]:
    builder = _BUILDERS.get(schema.type)
    if builder is None:
        raise builders.invalid_type(schema.type)
    return builder(schema, required)


# ============================================================================
# Bounds
# ============================================================================

def _has_bound(raw: int | float | str | None) -> bool:
    return raw is not None and raw != ""


def _integer_bound(keyword: str, raw: int | float | str, rounding: str) -> int:
    """Read an integer bound, rounding a decimal bound inwards (ceil for minimum, floor for maximum)."""
    if isinstance(raw, int):
        return raw
    try:
        bound = Decimal(str(raw).strip())
    except InvalidOperation:
        raise builders.invalid_bound(keyword, raw) from None
    if not bound.is_finite():
        raise builders.invalid_bound(keyword, raw)
    return int(bound.to_integral_value(rounding=rounding))


def _number_bound(keyword: str, raw: int | float | str) -> float:
    try:
        bound = float(raw)
    except (TypeError, ValueError) as e:
        raise builders.invalid_bound(keyword, raw, e) from e
    if not math.isfinite(bound):
        raise builders.invalid_bound(keyword, raw, ValueError("bound must be finite"))
    return bound


# ============================================================================
# Builders
# ============================================================================

def _absent(required: bool) -> BaseException | None:
    """Outcome for a ``None`` value on a scalar node."""
    return VALUE_REQUIRED if required else None


def _build_null(schema: JSONSchema, required: bool) -> Schema[Any]:
    return new().custom(NullSchema())


def _build_boolean(schema: JSONSchema, required: bool) -> Schema[Any]:
    bool_schema = BoolSchema()

    def validate_boolean(value: Any):
        if isinstance(value, bool):
            return bool_schema.validate(value)
        if value is None:
            return _absent(required)
        return builders.unexpected_type("boolean", value)

    return new().custom(validate_boolean)


def _build_string(schema: JSONSchema, required: bool) -> Schema[Any]:
    str_schema = StringSchema()

    if schema.min_length is not None:
        str_schema.min(schema.min_length)
    if schema.max_length is not None:
        str_schema.max(schema.max_length)
    if schema.pattern:
        try:
            pattern = re.compile(schema.pattern)
        except re.error as e:
            raise builders.invalid_pattern(schema.pattern, e) from e
        str_schema.regexp(pattern)

    if required:
        str_schema.required()

    def validate_string(value: Any):
        if value is None:
            return _absent(required)
        return str_schema.validate(value)

    return new().custom(validate_string)


def _build_integer(schema: JSONSchema, required: bool) -> Schema[Any]:
    num_schema = NumberSchema[int]()

    if _has_bound(schema.minimum):
        num_schema.min(_integer_bound("minimum", schema.minimum, ROUND_CEILING))
    if _has_bound(schema.maximum):
        num_schema.max(_integer_bound("maximum", schema.maximum, ROUND_FLOOR))

    if required:
        num_schema.required()

    def validate_integer(value: Any):
        if value is None:
            return _absent(required)
        match to_int64(value):
            case Ok(n):
                return num_schema.validate(n)
            case Err(error):
                return error

    return new().custom(validate_integer)


def _build_number(schema: JSONSchema, required: bool) -> Schema[Any]:
    num_schema = NumberSchema[float]()

    if _has_bound(schema.minimum):
        num_schema.min(_number_bound("minimum", schema.minimum))
    if _has_bound(schema.maximum):
        num_schema.max(_number_bound("maximum", schema.maximum))

    if required:
        num_schema.required()

    def validate_number(value: Any):
        if value is None:
            return _absent(required)
        match to_float64(value):
            case Ok(f):
                return num_schema.validate(f)
            case Err(error):
                return error

    return new().custom(validate_number)


def _build_array(schema: JSONSchema, required: bool) -> Schema[Any]:
    arr_schema = ArraySchema[Any]()

    if schema.items is not None:
        try:
            item_schema = _parse(schema.items, required=False)
        except SchemaBuildError as e:
            raise builders.invalid_item_schema(e) from e
        arr_schema.items(item_schema)

    if schema.min_items is not None:
        arr_schema.min(schema.min_items)
    if schema.max_items is not None:
        arr_schema.max(schema.max_items)
    if schema.unique_items:
        arr_schema.unique_items()

    min_items = schema.min_items or 0

    def validate_array(value: Any):
        if value is None:
            # Absent arrays only fail when required and a non-empty array is demanded.
            return VALUE_REQUIRED if required and min_items > 0 else None
        if not is_sequence(value):
            return builders.unexpected_type("array", value)
        return arr_schema.validate(value)

    return new().custom(validate_array)


def _build_object(schema: JSONSchema, required: bool) -> Schema[Any]:
    obj_schema = ObjectSchema[Mapping[str, Any]]()

    for name, prop in schema.properties.items():
        if prop is None:
            continue
        try:
            field_schema = _parse(prop, required=name in schema.required)
        except SchemaBuildError as e:
            raise builders.invalid_property(name, e) from e
        obj_schema.field(name, field_schema)

    # validate_map treats None as an empty mapping and rejects non-mappings.
    return new().custom(obj_schema.validate_map)


_BUILDERS: dict[str, Callable[[JSONSchema, bool], Schema[Any]]] = {
    "null": _build_null,
    "boolean": _build_boolean,
    "string": _build_string,
    "integer": _build_integer,
    "number": _build_number,
    "array": _build_array,
    "object": _build_object,
}
