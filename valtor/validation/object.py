"""Object schema: named field validation.

Two explicit input modes:

- by accessor: ``validate(value)`` hands the whole value to every field
  predicate, which extracts its own field (usually via ``validate_field``).
- by key: ``validate_map(values)`` hands each field predicate
  ``values.get(name)``; an absent key arrives as ``None`` and the field's
  own schema decides whether that is acceptable.

Fields run in declaration order. The first failing field stops validation
and its error is wrapped as ``validation failed for field "<name>": ...``.
Nested object schemas repeat the wrap, one level per object:

    address = ObjectSchema[Address]().field("zip", validate_field(lambda a: a.zip, StringSchema().length(5)))
    user = ObjectSchema[User]().field("address", validate_field(lambda u: u.address, address))
    user.validate(u)
    # validation failed for field "address": validation failed for field "zip": length must be exactly 5

A schema is called in accessor mode when used as a predicate. Register a
nested by-key schema through its bound method so it looks up keys too:

    address = ObjectSchema[dict]().field("zip", StringSchema().length(5))
    user = ObjectSchema[dict]().field("address", address.validate_map)
    user.validate_map({"address": {"zip": "123"}})
    # validation failed for field "address": validation failed for field "zip": length must be exactly 5
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, TypeVar, Union

from valtor.errors import builders
from valtor.logging import schema_logger

from .base import Predicate, TypedSchema, Validator, as_predicate, run_predicate

T = TypeVar("T")
F = TypeVar("F")

log = schema_logger()

FieldValidator = Callable[[Any], "BaseException | None"]
FieldValidatorMap = Mapping[str, Union[FieldValidator, Validator[Any]]]


def validate_field(getter: Callable[[T], F], schema: Validator[F]) -> Callable[[T], BaseException | None]:
    """Build a field predicate from a getter and any validator."""
    def validate(value: T) -> BaseException | None:
        return schema.validate(getter(value))
    return validate


class ObjectSchema(TypedSchema[T]):
    __slots__ = ("_fields",)

    def __init__(self) -> None:
        super().__init__()
        self._fields: dict[str, FieldValidator] = {}

    @property
    def fields(self) -> tuple[str, ...]:
        """Registered field names in declaration order."""
        return tuple(self._fields)

    def field(self, name: str, fn: FieldValidator | Validator[Any]) -> ObjectSchema[T]:
        """Register one field predicate or Validator. Re-registering a name replaces it in place."""
        predicate = as_predicate(fn)

        def validate_one(value: Any) -> BaseException | None:
            if (error := run_predicate(predicate, value)) is not None:
                return builders.invalid_field(name, error)
            return None
        if name in self._fields:
            log.debug("object_field_replaced", field=name)
        self._fields[name] = validate_one
        return self

    def map(self, fields: FieldValidatorMap) -> ObjectSchema[T]:
        """Register every ``name -> predicate`` pair of ``fields``."""
        for name, fn in fields.items():
            self.field(name, fn)
        return self

    def custom(self, fn: Predicate[T]) -> ObjectSchema[T]:
        """Append a whole-value predicate, run after every field has passed."""
        return self._attach(fn)

    def validate(self, value: T) -> BaseException | None:
        """Validate a structured value; field predicates extract their own fields."""
        for validate_one in self._fields.values():
            if (error := validate_one(value)) is not None:
                return error
        return self.schema.validate(value)

    def validate_map(self, values: Mapping[str, Any] | None) -> BaseException | None:
        """Validate a string-keyed mapping; each field predicate gets its looked-up value."""
        if values is None:
            values = {}
        elif not isinstance(values, Mapping):
            return builders.unexpected_type("object", values)
        for name, validate_one in self._fields.items():
            if (error := validate_one(values.get(name))) is not None:
                return error
        return self.schema.validate(values)
