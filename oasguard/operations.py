"""Locating operations, parameters and content types for a request."""

from __future__ import annotations

from .constants import BOUNDARY, CHARSET, EQUALS, SEMICOLON
from .model import Operation, Parameter, PathItem, Request

_METHOD_ATTRIBUTES = {
    "GET": "get",
    "POST": "post",
    "PUT": "put",
    "DELETE": "delete",
    "OPTIONS": "options",
    "HEAD": "head",
    "PATCH": "patch",
    "TRACE": "trace",
}


def extract_operation(request: Request, item: PathItem) -> Operation | None:
    """Return the operation of the path item for the request method, or None."""
    attribute = _METHOD_ATTRIBUTES.get(request.method)
    if attribute is None:
        return None
    return getattr(item, attribute)


def extract_content_type(content_type: str) -> tuple[str, str, str]:
    """Split a Content-Type value into (media type, charset, boundary)."""
    if ";" not in content_type:
        return content_type.strip(), "", ""
    media_type, *segments = content_type.split(SEMICOLON)
    charset = boundary = ""
    for segment in segments:
        pair = segment.split(EQUALS)
        if len(pair) != 2:
            continue
        key = pair[0].lower().strip()
        if key == CHARSET:
            charset = pair[1].strip()
        if key == BOUNDARY:
            boundary = pair[1].strip()
    return media_type.strip(), charset, boundary


def extract_params_for_operation(request: Request, item: PathItem) -> list[Parameter]:
    """Return the path level parameters followed by those of the matching operation."""
    params = list(item.parameters)
    operation = extract_operation(request, item)
    if operation is not None:
        params.extend(operation.parameters)
    return params