from urllib.parse import unquote_plus

import pytest

from oasguard.constants import JSON_CONTENT_TYPE, PARAMETER_VALIDATION, PARAMETER_VALIDATION_QUERY
from oasguard.errors import (
    HOW_TO_FIX_INVALID_JSON,
    HOW_TO_FIX_MISSING_VALUE,
    HOW_TO_FIX_PARAM_INVALID_BOOLEAN,
    HOW_TO_FIX_PARAM_INVALID_DEEP_OBJECT_MULTIPLE_VALUES,
    HOW_TO_FIX_PARAM_INVALID_FORM_ENCODE,
    HOW_TO_FIX_PARAM_INVALID_NUMBER,
    HOW_TO_FIX_PARAM_INVALID_PIPE_DELIMITED_OBJECT_EXPLODE,
    HOW_TO_FIX_PARAM_INVALID_SPACE_DELIMITED_OBJECT_EXPLODE,
    HOW_TO_FIX_RESERVED_VALUES,
)
from oasguard.model import MediaType, Parameter, Position, Schema
from oasguard.params import (
    QueryParam,
    collapse_csv_into_form_style,
    collapse_csv_into_pipe_delimited_style,
    collapse_csv_into_space_delimited_style,
)
from oasguard.query_errors import (
    incorrect_form_encoding,
    incorrect_param_encoding_json,
    incorrect_pipe_delimiting,
    incorrect_query_param_array_boolean,
    incorrect_query_param_array_number,
    incorrect_query_param_bool,
    incorrect_query_param_enum,
    incorrect_query_param_enum_array,
    incorrect_reserved_values,
    incorrect_space_delimiting,
    invalid_deep_object,
    invalid_query_param_number,
    query_parameter_missing,
)


def make_param(schema=None, **kwargs):
    return Parameter(
        name="colour",
        location="query",
        schema=schema,
        required_position=Position(3, 4),
        style_position=Position(5, 6),
        explode_position=Position(7, 8),
        schema_position=Position(9, 10),
        **kwargs,
    )


def assert_query_kind(err):
    assert err.validation_type == PARAMETER_VALIDATION
    assert err.validation_sub_type == PARAMETER_VALIDATION_QUERY


def test_incorrect_form_encoding():
    param = make_param()
    qp = QueryParam(key="colour", values=["x", "red,blue"])
    err = incorrect_form_encoding(param, qp, 1)
    assert_query_kind(err)
    assert err.message == "Query parameter 'colour' is not exploded correctly"
    assert "'red,blue'" in err.reason
    assert (err.spec_line, err.spec_col) == (7, 8)
    assert err.context is param
    assert err.how_to_fix == HOW_TO_FIX_PARAM_INVALID_FORM_ENCODE % collapse_csv_into_form_style(
        "colour", "red,blue"
    )
    assert err.how_to_fix.endswith("'&colour=red&colour=blue'")


def test_incorrect_space_delimiting():
    param = make_param()
    qp = QueryParam(key="colour", values=["red", "blue"])
    err = incorrect_space_delimiting(param, qp)
    assert_query_kind(err)
    assert err.message == "Query parameter 'colour' delimited incorrectly"
    assert "'spaceDelimited'" in err.reason
    assert "(2)" in err.reason
    assert (err.spec_line, err.spec_col) == (5, 6)
    assert err.how_to_fix == (
        HOW_TO_FIX_PARAM_INVALID_SPACE_DELIMITED_OBJECT_EXPLODE
        % collapse_csv_into_space_delimited_style("colour", qp.values)
    )


def test_incorrect_pipe_delimiting():
    param = make_param()
    qp = QueryParam(key="colour", values=["red", "blue", "green"])
    err = incorrect_pipe_delimiting(param, qp)
    assert_query_kind(err)
    assert "'pipeDelimited'" in err.reason
    assert "(3)" in err.reason
    assert err.how_to_fix == (
        HOW_TO_FIX_PARAM_INVALID_PIPE_DELIMITED_OBJECT_EXPLODE
        % collapse_csv_into_pipe_delimited_style("colour", qp.values)
    )
    assert err.how_to_fix.endswith("'colour=red|blue|green'")


def test_invalid_deep_object():
    param = make_param()
    qp = QueryParam(key="colour", values=["a", "b"], property="shade")
    err = invalid_deep_object(param, qp)
    assert_query_kind(err)
    assert err.message == "Query parameter 'colour' is not a valid deepObject"
    assert err.context is param
    assert err.how_to_fix == (
        HOW_TO_FIX_PARAM_INVALID_DEEP_OBJECT_MULTIPLE_VALUES
        % collapse_csv_into_pipe_delimited_style("colour", qp.values)
    )


def test_query_parameter_missing():
    param = make_param()
    err = query_parameter_missing(param)
    assert_query_kind(err)
    assert err.message == "Query parameter 'colour' is missing"
    assert err.how_to_fix == HOW_TO_FIX_MISSING_VALUE
    assert (err.spec_line, err.spec_col) == (3, 4)
    assert err.context is None


@pytest.mark.parametrize(
    "func, word, template",
    [
        (incorrect_query_param_array_boolean, "boolean", HOW_TO_FIX_PARAM_INVALID_BOOLEAN),
        (incorrect_query_param_array_number, "number", HOW_TO_FIX_PARAM_INVALID_NUMBER),
    ],
)
def test_array_item_errors(func, word, template):
    items = Schema(type=[word], type_position=Position(12, 14))
    sch = Schema(type=["array"], items=items)
    param = make_param(sch)
    err = func(param, "pb33f", sch, items)
    assert_query_kind(err)
    assert err.message == f"Query array parameter 'colour' is not a valid {word}"
    assert (err.spec_line, err.spec_col) == (12, 14)
    assert err.context is items
    assert err.how_to_fix == template % "pb33f"


def test_array_item_error_without_items_schema_has_no_position():
    sch = Schema(type=["array"])
    err = incorrect_query_param_array_number(make_param(sch), "x", sch, None)
    assert (err.spec_line, err.spec_col) == (0, 0)


def test_incorrect_param_encoding_json():
    sch = Schema(type=["object"])
    param = make_param(sch, content={JSON_CONTENT_TYPE: MediaType(schema=sch, position=Position(20, 2))})
    err = incorrect_param_encoding_json(param, "{nope", sch)
    assert_query_kind(err)
    assert err.message == "Query parameter 'colour' is not valid JSON"
    assert "'{nope'" in err.reason
    assert (err.spec_line, err.spec_col) == (20, 2)
    assert err.how_to_fix == HOW_TO_FIX_INVALID_JSON


def test_incorrect_query_param_bool():
    sch = Schema(type=["boolean"])
    err = incorrect_query_param_bool(make_param(sch), "12345", sch)
    assert_query_kind(err)
    assert err.message == "Query parameter 'colour' is not a valid boolean"
    assert err.how_to_fix == "Convert the value '12345' into a true/false value"
    assert (err.spec_line, err.spec_col) == (9, 10)
    assert err.context is sch


def test_invalid_query_param_number():
    sch = Schema(type=["number"])
    err = invalid_query_param_number(make_param(sch), "false", sch)
    assert err.message == "Query parameter 'colour' is not a valid number"
    assert err.how_to_fix == "Convert the value 'false' into a number"


def test_incorrect_query_param_enum_strings():
    sch = Schema(type=["string"], enum=["beef", "chicken", "pea protein"], enum_position=Position(30, 5))
    err = incorrect_query_param_enum(make_param(sch), "milk", sch)
    assert_query_kind(err)
    assert err.message == "Query parameter 'colour' does not match allowed values"
    assert err.how_to_fix == (
        "Instead of 'milk', use one of the allowed values: 'beef, chicken, pea protein'"
    )
    assert (err.spec_line, err.spec_col) == (30, 5)


def test_incorrect_query_param_enum_numbers_and_bools():
    sch = Schema(type=["integer"], enum=[1, 2, 99])
    err = incorrect_query_param_enum(make_param(sch), "2500", sch)
    assert err.how_to_fix == "Instead of '2500', use one of the allowed values: '1, 2, 99'"
    bool_sch = Schema(type=["boolean"], enum=[True, False])
    err = incorrect_query_param_enum(make_param(bool_sch), "maybe", bool_sch)
    assert err.how_to_fix.endswith("'true, false'")


def test_incorrect_query_param_enum_array_uses_items_enum():
    items = Schema(type=["string"], enum=["glass", "china", "thermos"], enum_position=Position(40, 9))
    sch = Schema(type=["array"], items=items)
    err = incorrect_query_param_enum_array(make_param(sch), "microwave", sch)
    assert_query_kind(err)
    assert err.message == "Query array parameter 'colour' does not match allowed values"
    assert err.how_to_fix == (
        "Instead of 'microwave', use one of the allowed values: 'glass, china, thermos'"
    )
    assert err.spec_line == 40
    assert err.spec_col == err.spec_line


@pytest.mark.parametrize("value", ["a b&c", "x/y?z=1", "plain", "[]@!$'()*+,;="])
def test_incorrect_reserved_values_round_trip(value):
    sch = Schema(type=["string"])
    err = incorrect_reserved_values(make_param(sch), value, sch)
    assert_query_kind(err)
    prefix, _, rest = HOW_TO_FIX_RESERVED_VALUES.partition("%s")
    assert err.how_to_fix.startswith(prefix)
    encoded = err.how_to_fix[len(prefix):-len(rest)]
    assert unquote_plus(encoded) == value
    assert not set(encoded) & set(" &/?#[]@!$'()*,;=")


def test_incorrect_reserved_values_encoding():
    sch = Schema(type=["string"])
    err = incorrect_reserved_values(make_param(sch), "a b&c", sch)
    assert err.how_to_fix.endswith("'a+b%26c'")
    assert "'a b&c'" in err.reason