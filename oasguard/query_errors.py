"""Validation errors raised for query parameters."""

from __future__ import annotations

import math
from typing import Any, Iterable
from urllib.parse import quote_plus

from .constants import JSON_CONTENT_TYPE, PARAMETER_VALIDATION, PARAMETER_VALIDATION_QUERY
from .errors import (
    HOW_TO_FIX_INVALID_JSON,
    HOW_TO_FIX_MISSING_VALUE,
    HOW_TO_FIX_PARAM_INVALID_BOOLEAN,
    HOW_TO_FIX_PARAM_INVALID_DEEP_OBJECT_MULTIPLE_VALUES,
    HOW_TO_FIX_PARAM_INVALID_ENUM,
    HOW_TO_FIX_PARAM_INVALID_FORM_ENCODE,
    HOW_TO_FIX_PARAM_INVALID_NUMBER,
    HOW_TO_FIX_PARAM_INVALID_PIPE_DELIMITED_OBJECT_EXPLODE,
    HOW_TO_FIX_PARAM_INVALID_SPACE_DELIMITED_OBJECT_EXPLODE,
    HOW_TO_FIX_RESERVED_VALUES,
    ValidationError,
)
from .model import Parameter, Position, Schema
from .params import (
    QueryParam,
    collapse_csv_into_form_style,
    collapse_csv_into_pipe_delimited_style,
    collapse_csv_into_space_delimited_style,
)


def _format_value(value: Any) -> str:
    """Render an enum value the way a plain value print would show it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def _join_enum(values: Iterable[Any] | None) -> str:
    return ", ".join(_format_value(value) for value in values or ())


def _items_type_position(sch: Schema | None) -> Position:
    if sch is None or sch.items is None:
        return Position()
    return sch.items.type_position


def _query_error(
    param: Parameter,
    message: str,
    reason: str,
    position: Position,
    how_to_fix: str,
    context: Any = None,
) -> ValidationError:
    return ValidationError(
        validation_type=PARAMETER_VALIDATION,
        validation_sub_type=PARAMETER_VALIDATION_QUERY,
        message=message,
        reason=reason,
        spec_line=position.line,
        spec_col=position.column,
        context=context,
        how_to_fix=how_to_fix,
    )


def incorrect_form_encoding(param: Parameter, qp: QueryParam, index: int) -> ValidationError:
    """Report a form encoded value that packs several values with commas."""
    value = qp.values[index]
    return _query_error(
        param,
        f"Query parameter '{param.name}' is not exploded correctly",
        f"The query parameter '{param.name}' has a default or 'form' encoding defined, "
        f"however the value '{value}' is encoded as an object or an array using commas. "
        "The contract defines the explode value to set to 'true'",
        param.explode_position,
        HOW_TO_FIX_PARAM_INVALID_FORM_ENCODE % collapse_csv_into_form_style(param.name, value),
        param,
    )


def incorrect_space_delimiting(param: Parameter, qp: QueryParam) -> ValidationError:
    """Report several values supplied for an unexploded spaceDelimited parameter."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' delimited incorrectly",
        f"The query parameter '{param.name}' has 'spaceDelimited' style defined, "
        f"and explode is defined as false. There are multiple values ({len(qp.values)}) "
        "supplied, instead of a single space delimited value",
        param.style_position,
        HOW_TO_FIX_PARAM_INVALID_SPACE_DELIMITED_OBJECT_EXPLODE
        % collapse_csv_into_space_delimited_style(param.name, qp.values),
        param,
    )


def incorrect_pipe_delimiting(param: Parameter, qp: QueryParam) -> ValidationError:
    """Report several values supplied for an unexploded pipeDelimited parameter."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' delimited incorrectly",
        f"The query parameter '{param.name}' has 'pipeDelimited' style defined, "
        f"and explode is defined as false. There are multiple values ({len(qp.values)}) "
        "supplied, instead of a single space delimited value",
        param.style_position,
        HOW_TO_FIX_PARAM_INVALID_PIPE_DELIMITED_OBJECT_EXPLODE
        % collapse_csv_into_pipe_delimited_style(param.name, qp.values),
        param,
    )


def invalid_deep_object(param: Parameter, qp: QueryParam) -> ValidationError:
    """Report a deepObject property that was given several values."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' is not a valid deepObject",
        f"The query parameter '{param.name}' has the 'deepObject' style defined, "
        f"There are multiple values ({len(qp.values)}) supplied, instead of a single value",
        param.style_position,
        HOW_TO_FIX_PARAM_INVALID_DEEP_OBJECT_MULTIPLE_VALUES
        % collapse_csv_into_pipe_delimited_style(param.name, qp.values),
        param,
    )


def query_parameter_missing(param: Parameter) -> ValidationError:
    """Report a required query parameter that is absent."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' is missing",
        f"The query parameter '{param.name}' is defined as being required, "
        "however it's missing from the requests",
        param.required_position,
        HOW_TO_FIX_MISSING_VALUE,
    )


def incorrect_query_param_array_boolean(
    param: Parameter, item: str, sch: Schema, items_schema: Schema
) -> ValidationError:
    """Report an array item that should be a boolean."""
    return _query_error(
        param,
        f"Query array parameter '{param.name}' is not a valid boolean",
        f"The query parameter (which is an array) '{param.name}' is defined as being a boolean, "
        f"however the value '{item}' is not a valid true/false value",
        _items_type_position(sch),
        HOW_TO_FIX_PARAM_INVALID_BOOLEAN % item,
        items_schema,
    )


def incorrect_query_param_array_number(
    param: Parameter, item: str, sch: Schema, items_schema: Schema
) -> ValidationError:
    """Report an array item that should be a number."""
    return _query_error(
        param,
        f"Query array parameter '{param.name}' is not a valid number",
        f"The query parameter (which is an array) '{param.name}' is defined as being a number, "
        f"however the value '{item}' is not a valid number",
        _items_type_position(sch),
        HOW_TO_FIX_PARAM_INVALID_NUMBER % item,
        items_schema,
    )


def incorrect_param_encoding_json(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """Report a JSON encoded parameter whose value is not valid JSON."""
    media = param.content.get(JSON_CONTENT_TYPE)
    return _query_error(
        param,
        f"Query parameter '{param.name}' is not valid JSON",
        f"The query parameter '{param.name}' is defined as being a JSON object, "
        f"however the value '{ef}' is not valid JSON",
        media.position if media is not None else Position(),
        HOW_TO_FIX_INVALID_JSON,
        sch,
    )


def incorrect_query_param_bool(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """Report a value that should be a boolean."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' is not a valid boolean",
        f"The query parameter '{param.name}' is defined as being a boolean, "
        f"however the value '{ef}' is not a valid boolean",
        param.schema_position,
        HOW_TO_FIX_PARAM_INVALID_BOOLEAN % ef,
        sch,
    )


def invalid_query_param_number(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """Report a value that should be a number."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' is not a valid number",
        f"The query parameter '{param.name}' is defined as being a number, "
        f"however the value '{ef}' is not a valid number",
        param.schema_position,
        HOW_TO_FIX_PARAM_INVALID_NUMBER % ef,
        sch,
    )


def incorrect_query_param_enum(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """Report a value outside the schema's enum."""
    position = param.schema.enum_position if param.schema is not None else Position()
    return _query_error(
        param,
        f"Query parameter '{param.name}' does not match allowed values",
        f"The query parameter '{param.name}' has pre-defined "
        f"values set via an enum. The value '{ef}' is not one of those values.",
        position,
        HOW_TO_FIX_PARAM_INVALID_ENUM % (ef, _join_enum(sch.enum)),
        sch,
    )


def incorrect_query_param_enum_array(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """Report an array item outside the enum of the parameter's items schema."""
    items = param.schema.items if param.schema is not None else None
    enum = items.enum if items is not None else None
    line = items.enum_position.line if items is not None else 0
    return ValidationError(
        validation_type=PARAMETER_VALIDATION,
        validation_sub_type=PARAMETER_VALIDATION_QUERY,
        message=f"Query array parameter '{param.name}' does not match allowed values",
        reason=(
            f"The query array parameter '{param.name}' has pre-defined "
            f"values set via an enum. The value '{ef}' is not one of those values."
        ),
        spec_line=line,
        spec_col=line,
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_ENUM % (ef, _join_enum(enum)),
    )


def incorrect_reserved_values(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """Report a value holding reserved characters while allowReserved is false."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' value contains reserved values",
        f"The query parameter '{param.name}' has 'allowReserved' set to false, "
        f"however the value '{ef}' contains one of the following characters: "
        ":/?#[]@!$&'()*+,;=",
        param.schema_position,
        HOW_TO_FIX_RESERVED_VALUES % quote_plus(ef, safe=""),
        sch,
    )