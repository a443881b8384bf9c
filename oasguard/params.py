"""Decoding of encoded parameter values into maps and lists."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from .constants import COMMA, EQUALS, FORM, PERIOD, PIPE, PIPE_DELIMITED, SEMICOLON, SPACE, SPACE_DELIMITED

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_SPECIAL_FLOAT = re.compile(r"[+-]?(inf|infinity|nan)", re.IGNORECASE)
_DECIMAL_FLOAT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_HEX_FLOAT = re.compile(r"[+-]?0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?\d+")
_INTEGER = re.compile(r"[+-]?\d+")


@dataclass
class QueryParam:
    """A query parameter key with its values and, for deep objects, a property name."""

    key: str
    values: list[str] = field(default_factory=list)
    property: str = ""


def _parse_float(text: str) -> float | None:
    if _SPECIAL_FLOAT.fullmatch(text):
        return float(text)
    if _DECIMAL_FLOAT.fullmatch(text):
        result = float(text)
    elif _HEX_FLOAT.fullmatch(text):
        result = float.fromhex(text)
    else:
        return None
    return None if math.isinf(result) else result


def _parse_int(text: str) -> int:
    # Mirrors a lenient integer parse: unparsable text gives 0, overflow clamps.
    if not _INTEGER.fullmatch(text):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(text)))


def _cast(value: str) -> Any:
    if value in ("true", "false"):
        return value == "true"
    number = _parse_float(value)
    if number is None:
        return value
    if PERIOD not in value:
        return _parse_int(value)
    return number


def _pairs(encoded: str, delimiter: str) -> dict[str, Any]:
    parts = encoded.split(delimiter)
    if len(parts) % 2:
        raise ValueError(f"expected key/value pairs, got an odd number of items in {encoded!r}")
    return {key: _cast(value) for key, value in zip(parts[::2], parts[1::2])}


def _key_values(encoded: str, delimiter: str) -> dict[str, Any]:
    props: dict[str, Any] = {}
    for item in encoded.split(delimiter):
        pair = item.split(EQUALS)
        if len(pair) == 2:
            props[pair[0]] = _cast(pair[1])
    return props


def construct_param_map_from_deep_object_encoding(values: Iterable[QueryParam]) -> dict[str, Any]:
    """Build nested maps from deepObject encoded query parameters."""
    decoded: dict[str, Any] = {}
    for qp in values:
        decoded.setdefault(qp.key, {})[qp.property] = _cast(qp.values[0])
    return decoded


def construct_param_map_from_query_param_input(
    values: Mapping[str, Iterable[QueryParam]],
) -> dict[str, Any]:
    """Build a flat map from grouped query parameters, using each first value."""
    return {qp.key: _cast(qp.values[0]) for group in values.values() for qp in group}


def construct_param_map_from_pipe_encoding(values: Iterable[QueryParam]) -> dict[str, Any]:
    """Build maps from pipe separated key/value pairs."""
    return {qp.key: _pairs(qp.values[0], PIPE) for qp in values}


def construct_param_map_from_space_encoding(values: Iterable[QueryParam]) -> dict[str, Any]:
    """Build maps from space separated key/value pairs."""
    return {qp.key: _pairs(qp.values[0], SPACE) for qp in values}


def construct_map_from_csv(csv: str) -> dict[str, Any]:
    """Build a map from comma separated alternating keys and values; a lone trailing key is dropped."""
    parts = csv.split(COMMA)
    return {key: _cast(value) for key, value in zip(parts[::2], parts[1::2])}


def construct_kv_from_csv(values: str) -> dict[str, Any]:
    """Build a map from comma separated key=value pairs."""
    return _key_values(values, COMMA)


def construct_kv_from_label_encoding(values: str) -> dict[str, Any]:
    """Build a map from period separated key=value pairs."""
    return _key_values(values, PERIOD)


def construct_kv_from_matrix_csv(values: str) -> dict[str, Any]:
    """Build a map from semicolon separated key=value pairs."""
    return _key_values(values, SEMICOLON)


def construct_param_map_from_form_encoding_array(values: Iterable[QueryParam]) -> dict[str, Any]:
    """Build maps from comma separated key/value pairs."""
    return {qp.key: _pairs(qp.values[0], COMMA) for qp in values}


def does_form_param_contain_delimiter(value: str, style: str) -> bool:
    """Return True if a form (or unstyled) parameter value holds a comma."""
    return COMMA in value and style in ("", FORM)


def explode_query_value(value: str, style: str) -> list[str]:
    """Split a query value by the delimiter its style implies."""
    if style == SPACE_DELIMITED:
        return value.split(SPACE)
    if style == PIPE_DELIMITED:
        return value.split(PIPE)
    return value.split(COMMA)


def collapse_csv_into_form_style(key: str, value: str) -> str:
    """Rewrite a comma separated value as repeated form style key=value pairs."""
    return f"&{key}=" + f"&{key}=".join(value.split(COMMA))


def collapse_csv_into_space_delimited_style(key: str, values: Iterable[str]) -> str:
    """Join values into a single URL encoded space delimited parameter."""
    return f"{key}=" + "%20".join(values)


def collapse_csv_into_pipe_delimited_style(key: str, values: Iterable[str]) -> str:
    """Join values into a single pipe delimited parameter."""
    return f"{key}=" + PIPE.join(values)