"""Tests for NumberSchema."""
from decimal import Decimal
from fractions import Fraction

from valtor import VALUE_REQUIRED, NumberSchema


def test_min_max_int():
    schema = NumberSchema[int]().min(18).max(120)

    assert schema.validate(30) is None
    assert str(schema.validate(17)) == "value must be at least 18"
    assert str(schema.validate(121)) == "value must be at most 120"


def test_range_is_inclusive():
    schema = NumberSchema[int]().min(0).max(10)

    for v in range(-3, 14):
        assert (schema.validate(v) is None) == (0 <= v <= 10)


def test_required_rejects_zero():
    schema = NumberSchema[int]().required()

    assert schema.validate(0) is VALUE_REQUIRED
    assert schema.validate(0.0) is VALUE_REQUIRED
    assert schema.validate(None) is VALUE_REQUIRED
    assert schema.validate(1) is None


def test_required_checked_before_bounds():
    schema = NumberSchema[int]().min(5).required()
    assert schema.validate(0) is VALUE_REQUIRED


def test_float_bounds_render_shortest_form():
    assert str(NumberSchema[float]().min(0.5).validate(0.4)) == "value must be at least 0.5"
    assert str(NumberSchema[float]().max(100.0).validate(100.5)) == "value must be at most 100"


def test_decimal_and_fraction():
    assert str(NumberSchema[Decimal]().min(Decimal("1.5")).validate(Decimal("1.4"))) == "value must be at least 1.5"
    assert NumberSchema().max(Fraction(1, 2)).validate(Fraction(1, 3)) is None


def test_custom():
    schema = NumberSchema[int]().custom(lambda v: ValueError("value must be positive") if v <= 0 else None)

    assert schema.validate(5) is None
    assert str(schema.validate(-1)) == "value must be positive"


def test_rejects_non_numbers():
    assert str(NumberSchema().validate("10")) == "expected numeric value, got str"
    assert str(NumberSchema().validate(True)) == "expected numeric value, got bool"


def test_none_is_validated_as_zero():
    assert NumberSchema[int]().validate(None) is None
    assert str(NumberSchema[int]().min(1).validate(None)) == "value must be at least 1"


def test_rejects_nan():
    schema = NumberSchema[float]().min(0).max(10)

    assert str(schema.validate(float("nan"))) == "value must be a number, got NaN"
    assert str(NumberSchema[Decimal]().validate(Decimal("NaN"))) == "value must be a number, got NaN"
    assert schema.validate(float("inf")) is not None
