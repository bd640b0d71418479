import math

import pytest

from SimplePreferences.core import codec
from SimplePreferences.errors import InvalidArgumentError, ValueParseError


def test_canonical_text_forms():
    assert codec.BOOLEAN.encode(False) == "false"
    assert codec.BOOLEAN.encode(True) == "true"
    assert codec.FLOAT.encode(1.23) == "1.23"
    assert codec.FLOAT.encode(3) == "3.0"
    assert codec.INT.encode(-7) == "-7"
    assert codec.LONG.encode(2**40) == str(2**40)
    assert codec.STRING.encode("a b=c") == "a b=c"


def test_float_text_survives_exactly():
    for value in (0.1, 1e-310, 123456789.123456789, -0.0, math.inf):
        assert codec.FLOAT.decode(codec.FLOAT.encode(value)) == value
    assert math.isnan(codec.FLOAT.decode(codec.FLOAT.encode(math.nan)))


def test_boolean_parsing_is_case_insensitive_but_strict():
    assert codec.BOOLEAN.decode("TRUE") is True
    assert codec.BOOLEAN.decode(" False ") is False
    with pytest.raises(ValueParseError):
        codec.BOOLEAN.decode("yes")


def test_int_range_checks():
    assert codec.INT.decode(str(codec.INT32_MAX)) == codec.INT32_MAX
    with pytest.raises(ValueParseError):
        codec.INT.decode(str(codec.INT32_MAX + 1))
    assert codec.LONG.decode(str(codec.INT32_MAX + 1)) == codec.INT32_MAX + 1
    with pytest.raises(ValueParseError):
        codec.LONG.decode(str(codec.INT64_MIN - 1))
    with pytest.raises(InvalidArgumentError):
        codec.INT.encode(codec.INT32_MIN - 1)


def test_non_numeric_text_is_a_parse_error():
    with pytest.raises(ValueParseError) as excinfo:
        codec.INT.decode("abc")
    assert excinfo.value.details["type"] == "int"
    with pytest.raises(ValueParseError):
        codec.FLOAT.decode("1,5")


def test_wrong_types_are_rejected():
    with pytest.raises(InvalidArgumentError):
        codec.INT.encode(True)
    with pytest.raises(InvalidArgumentError):
        codec.FLOAT.encode("1.0")
    with pytest.raises(InvalidArgumentError):
        codec.BOOLEAN.encode(1)


def test_codec_for_unknown_type():
    assert codec.codec_for("long") is codec.LONG
    with pytest.raises(InvalidArgumentError):
        codec.codec_for("decimal")


def test_int_too_large_for_float_is_rejected():
    with pytest.raises(InvalidArgumentError) as excinfo:
        codec.FLOAT.encode(10**400)
    assert excinfo.value.details["type"] == "float"
    assert codec.FLOAT.encode(2**60) == repr(float(2**60))
