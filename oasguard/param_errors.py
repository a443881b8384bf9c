"""Validation errors raised for header, cookie and path parameters."""

from __future__ import annotations

from typing import Any

from .constants import (
    PARAMETER_VALIDATION,
    PARAMETER_VALIDATION_COOKIE,
    PARAMETER_VALIDATION_HEADER,
    PARAMETER_VALIDATION_PATH,
)
from .errors import (
    HOW_TO_FIX_INVALID_ENCODING,
    HOW_TO_FIX_MISSING_VALUE,
    HOW_TO_FIX_PARAM_INVALID_BOOLEAN,
    HOW_TO_FIX_PARAM_INVALID_ENUM,
    HOW_TO_FIX_PARAM_INVALID_NUMBER,
    ValidationError,
)
from .model import Parameter, Position, Schema
from .query_errors import _items_type_position, _join_enum


def _param_error(
    sub_type: str,
    message: str,
    reason: str,
    position: Position,
    how_to_fix: str,
    context: Any = None,
) -> ValidationError:
    return ValidationError(
        validation_type=PARAMETER_VALIDATION,
        validation_sub_type=sub_type,
        message=message,
        reason=reason,
        spec_line=position.line,
        spec_col=position.column,
        context=context,
        how_to_fix=how_to_fix,
    )


def _enum_position(param: Parameter) -> Position:
    return param.schema.enum_position if param.schema is not None else Position()


def _type_line(param: Parameter) -> int:
    return param.schema.type_position.line if param.schema is not None else 0


# Header parameters


def header_parameter_missing(param: Parameter) -> ValidationError:
    """Report a required header parameter that is absent."""
    return _param_error(
        PARAMETER_VALIDATION_HEADER,
        f"Header parameter '{param.name}' is missing",
        f"The header parameter '{param.name}' is defined as being required, "
        "however it's missing from the requests",
        param.required_position,
        HOW_TO_FIX_MISSING_VALUE,
    )


def header_parameter_cannot_be_decoded(param: Parameter, val: str) -> ValidationError:
    """Report a header value that cannot be decoded into an object."""
    line = _type_line(param)
    return _param_error(
        PARAMETER_VALIDATION_HEADER,
        f"Header parameter '{param.name}' cannot be decoded",
        f"The header parameter '{param.name}' cannot be "
        f"extracted into an object, '{val}' is malformed",
        Position(line, line),
        HOW_TO_FIX_INVALID_ENCODING,
    )


def incorrect_header_param_enum(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """Report a header value outside the schema's enum."""
    return _param_error(
        PARAMETER_VALIDATION_HEADER,
        f"Header parameter '{param.name}' does not match allowed values",
        f"The header parameter '{param.name}' has pre-defined "
        f"values set via an enum. The value '{ef}' is not one of those values.",
        _enum_position(param),
        HOW_TO_FIX_PARAM_INVALID_ENUM % (ef, _join_enum(sch.enum)),
        sch,
    )


def invalid_header_param_number(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """Report a header value that should be a number."""
    return _param_error(
        PARAMETER_VALIDATION_HEADER,
        f"Header parameter '{param.name}' is not a valid number",
        f"The header parameter '{param.name}' is defined as being a number, "
        f"however the value '{ef}' is not a valid number",
        param.schema_position,
        HOW_TO_FIX_PARAM_INVALID_NUMBER % ef,
        sch,
    )


def incorrect_header_param_bool(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """Report a header value that should be a boolean."""
    return _param_error(
        PARAMETER_VALIDATION_HEADER,
        f"Header parameter '{param.name}' is not a valid boolean",
        f"The header parameter '{param.name}' is defined as being a boolean, "
        f"however the value '{ef}' is not a valid boolean",
        param.schema_position,
        HOW_TO_FIX_PARAM_INVALID_BOOLEAN % ef,
        sch,
    )


def incorrect_header_param_array_boolean(
    param: Parameter, item: str, sch: Schema, items_schema: Schema
) -> ValidationError:
    """Report a header array item that should be a boolean."""
    return _param_error(
        PARAMETER_VALIDATION_HEADER,
        f"Header array parameter '{param.name}' is not a valid boolean",
        f"The header parameter (which is an array) '{param.name}' is defined as being a boolean, "
        f"however the value '{item}' is not a valid true/false value",
        _items_type_position(sch),
        HOW_TO_FIX_PARAM_INVALID_BOOLEAN % item,
        items_schema,
    )


def incorrect_header_param_array_number(
    param: Parameter, item: str, sch: Schema, items_schema: Schema
) -> ValidationError:
    """Report a header array item that should be a number."""
    return _param_error(
        PARAMETER_VALIDATION_HEADER,
        f"Header array parameter '{param.name}' is not a valid number",
        f"The header parameter (which is an array) '{param.name}' is defined as being a number, "
        f"however the value '{item}' is not a valid number",
        _items_type_position(sch),
        HOW_TO_FIX_PARAM_INVALID_NUMBER % item,
        items_schema,
    )


# Cookie parameters


def incorrect_cookie_param_array_boolean(
    param: Parameter, item: str, sch: Schema, items_schema: Schema
) -> ValidationError:
    """Report a cookie array item that should be a boolean."""
    return _param_error(
        PARAMETER_VALIDATION_COOKIE,
        f"Cookie array parameter '{param.name}' is not a valid boolean",
        f"The cookie parameter (which is an array) '{param.name}' is defined as being a boolean, "
        f"however the value '{item}' is not a valid true/false value",
        _items_type_position(sch),
        HOW_TO_FIX_PARAM_INVALID_BOOLEAN % item,
        items_schema,
    )


def incorrect_cookie_param_array_number(
    param: Parameter, item: str, sch: Schema, items_schema: Schema
) -> ValidationError:
    """Report a cookie array item that should be a number."""
    return _param_error(
        PARAMETER_VALIDATION_COOKIE,
        f"Cookie array parameter '{param.name}' is not a valid number",
        f"The cookie parameter (which is an array) '{param.name}' is defined as being a number, "
        f"however the value '{item}' is not a valid number",
        _items_type_position(sch),
        HOW_TO_FIX_PARAM_INVALID_NUMBER % item,
        items_schema,
    )


def invalid_cookie_param_number(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """Report a cookie value that should be a number."""
    return _param_error(
        PARAMETER_VALIDATION_COOKIE,
        f"Cookie parameter '{param.name}' is not a valid number",
        f"The cookie parameter '{param.name}' is defined as being a number, "
        f"however the value '{ef}' is not a valid number",
        param.schema_position,
        HOW_TO_FIX_PARAM_INVALID_NUMBER % ef,
        sch,
    )


def incorrect_cookie_param_bool(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """Report a cookie value that should be a boolean."""
    return _param_error(
        PARAMETER_VALIDATION_COOKIE,
        f"Cookie parameter '{param.name}' is not a valid boolean",
        f"The cookie parameter '{param.name}' is defined as being a boolean, "
        f"however the value '{ef}' is not a valid boolean",
        param.schema_position,
        HOW_TO_FIX_PARAM_INVALID_BOOLEAN % ef,
        sch,
    )


def incorrect_cookie_param_enum(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """Report a cookie value outside the schema's enum."""
    return _param_error(
        PARAMETER_VALIDATION_COOKIE,
        f"Cookie parameter '{param.name}' does not match allowed values",
        f"The cookie parameter '{param.name}' has pre-defined "
        f"values set via an enum. The value '{ef}' is not one of those values.",
        _enum_position(param),
        HOW_TO_FIX_PARAM_INVALID_ENUM % (ef, _join_enum(sch.enum)),
        sch,
    )


# Path parameters


def incorrect_path_param_bool(param: Parameter, item: str, sch: Schema) -> ValidationError:
    """Report a path value that should be a boolean."""
    return _param_error(
        PARAMETER_VALIDATION_PATH,
        f"Path parameter '{param.name}' is not a valid boolean",
        f"The path parameter '{param.name}' is defined as being a boolean, "
        f"however the value '{item}' is not a valid boolean",
        param.schema_position,
        HOW_TO_FIX_PARAM_INVALID_BOOLEAN % item,
        sch,
    )


def incorrect_path_param_enum(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """Report a path value outside the schema's enum."""
    return _param_error(
        PARAMETER_VALIDATION_PATH,
        f"Path parameter '{param.name}' does not match allowed values",
        f"The path parameter '{param.name}' has pre-defined "
        f"values setvia an enum. The value '{ef}' is not one of those values.",
        _enum_position(param),
        HOW_TO_FIX_PARAM_INVALID_ENUM % (ef, _join_enum(sch.enum)),
        sch,
    )


def incorrect_path_param_number(param: Parameter, item: str, sch: Schema) -> ValidationError:
    """Report a path value that should be a number."""
    return _param_error(
        PARAMETER_VALIDATION_PATH,
        f"Path parameter '{param.name}' is not a valid number",
        f"The path parameter '{param.name}' is defined as being a number, "
        f"however the value '{item}' is not a valid number",
        param.schema_position,
        HOW_TO_FIX_PARAM_INVALID_NUMBER % item,
        sch,
    )


def incorrect_path_param_array_number(
    param: Parameter, item: str, sch: Schema, items_schema: Schema
) -> ValidationError:
    """Report a path array item that should be a number."""
    return _param_error(
        PARAMETER_VALIDATION_PATH,
        f"Path array parameter '{param.name}' is not a valid number",
        f"The path parameter (which is an array) '{param.name}' is defined as being a number, "
        f"however the value '{item}' is not a valid number",
        _items_type_position(sch),
        HOW_TO_FIX_PARAM_INVALID_NUMBER % item,
        items_schema,
    )


def incorrect_path_param_array_boolean(
    param: Parameter, item: str, sch: Schema, items_schema: Schema
) -> ValidationError:
    """Report a path array item that should be a boolean."""
    return _param_error(
        PARAMETER_VALIDATION_PATH,
        f"Path array parameter '{param.name}' is not a valid boolean",
        f"The path parameter (which is an array) '{param.name}' is defined as being a boolean, "
        f"however the value '{item}' is not a valid boolean",
        _items_type_position(sch),
        HOW_TO_FIX_PARAM_INVALID_BOOLEAN % item,
        items_schema,
    )