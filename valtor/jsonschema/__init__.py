"""JSON Schema support: document model, numeric coercion and the adapter."""
from .model import JSONSchema
from .coercion import INT64_MAX, INT64_MIN, to_float64, to_int64
from .adapter import parse_json_schema, try_parse_json_schema

__all__ = [
    "JSONSchema",
    "INT64_MAX",
    "INT64_MIN",
    "to_float64",
    "to_int64",
    "parse_json_schema",
    "try_parse_json_schema",
]
