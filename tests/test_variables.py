import math
from decimal import Decimal

import pytest

from nosqlqtf.files import QtfError
from nosqlqtf.variables import JSON_NULL, ExtVariable, JsonNull, parse_variables


def test_plain_name_is_kept():
    assert parse_variables("$id", "7").name == "$id"


def test_typed_name_drops_type_prefix():
    assert parse_variables("string-$name", '"abc"').name == "$name"


@pytest.mark.parametrize("value", ["", "null"])
def test_sql_null(value):
    assert parse_variables("$v", value) == ExtVariable("$v", None)


def test_json_null_is_singleton():
    var = parse_variables("$v", "jnull")
    assert var.value is JSON_NULL
    assert JsonNull() is JSON_NULL


def test_typed_int_and_long():
    assert parse_variables("$v", "type:int:42").value == 42
    assert parse_variables("$v", "type:long:-9000000000").value == -9000000000


@pytest.mark.parametrize(
    "value",
    ["type:int:2147483648", "type:long:9223372036854775808", "type:int:abc", "type:int:1_0"],
)
def test_typed_integer_errors(value):
    with pytest.raises(QtfError):
        parse_variables("$v", value)


def test_typed_number_and_double():
    assert parse_variables("$v", "type:number:1.25").value == Decimal("1.25")
    assert parse_variables("$v", "type:double:2.5").value == 2.5


def test_typed_string_strips_quotes():
    assert parse_variables("$v", 'type:string:"hi:there"').value == "hi:there"
    assert parse_variables("$v", "type:string:plain").value == "plain"


def test_typed_json():
    assert parse_variables("$v", 'type:json:{"a": [1, 2]}').value == {"a": [1, 2]}
    assert parse_variables("$v", "type:json:null").value is JSON_NULL


def test_typed_boolean_is_strict():
    assert parse_variables("$v", "type:boolean:true").value is True
    assert parse_variables("$v", "type:boolean:false").value is False
    with pytest.raises(QtfError):
        parse_variables("$v", "type:boolean:True")


@pytest.mark.parametrize("value", ["type:int", "type:blob:1"])
def test_typed_malformed(value):
    with pytest.raises(QtfError):
        parse_variables("$v", value)


def test_inferred_integers():
    assert parse_variables("$v", "+12").value == 12
    assert parse_variables("$v", "-12").value == -12
    big = parse_variables("$v", "3000000000").value
    assert big == 3000000000 and isinstance(big, int)


def test_inferred_float_fallbacks():
    assert parse_variables("$v", "1.5").value == 1.5
    huge = parse_variables("$v", "9223372036854775808").value
    assert isinstance(huge, float) and huge == float(9223372036854775808)
    assert math.isinf(parse_variables("$v", "1e400").value)


def test_inferred_numeric_error():
    with pytest.raises(QtfError):
        parse_variables("$v", "12abc")


def test_inferred_string():
    assert parse_variables("$v", '"hello"').value == "hello"
    with pytest.raises(QtfError):
        parse_variables("$v", '"')


def test_inferred_json_object_and_array():
    assert parse_variables("$v", '{"k": "x", "n": null}').value == {"k": "x", "n": None}
    assert parse_variables("$v", '[1, "a", true]').value == [1, "a", True]


@pytest.mark.parametrize("value", ["{abc", "[1, 2", "{bad}", "[NaN]"])
def test_inferred_json_errors(value):
    with pytest.raises(QtfError):
        parse_variables("$v", value)


@pytest.mark.parametrize("value,expected", [("true", True), ("T", True), ("false", False), ("Fx", False)])
def test_inferred_booleans(value, expected):
    assert parse_variables("$v", value).value is expected


def test_unsupported_value():
    with pytest.raises(QtfError):
        parse_variables("$v", "@nope")