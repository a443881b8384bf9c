"""Errors about request and response content types and response codes."""

from __future__ import annotations

from .constants import (
    CONTENT_TYPE_HEADER,
    REQUEST_BODY_CONTENT_TYPE,
    REQUEST_BODY_VALIDATION,
    RESPONSE_BODY_RESPONSE_CODE,
    RESPONSE_BODY_VALIDATION,
)
from .errors import (
    HOW_TO_FIX_INVALID_CONTENT_TYPE,
    HOW_TO_FIX_INVALID_RESPONSE_CODE,
    ValidationError,
)
from .model import HttpResponse, Operation, Request
from .operations import extract_content_type


def request_content_type_not_found(op: Operation, request: Request) -> ValidationError:
    """Report a request content type the operation does not define."""
    content_type = request.header(CONTENT_TYPE_HEADER)
    body = op.request_body
    content = body.content if body is not None else {}
    position = body.content_position if body is not None else None
    return ValidationError(
        validation_type=REQUEST_BODY_VALIDATION,
        validation_sub_type=REQUEST_BODY_CONTENT_TYPE,
        message=(
            f"{request.method} operation request content type '{content_type}' does not exist"
        ),
        reason=(
            f"The content type '{content_type}' of the {request.method} request submitted has not "
            "been defined, it's an unknown type"
        ),
        spec_line=position.line if position else 0,
        spec_col=position.column if position else 0,
        context=op,
        how_to_fix=HOW_TO_FIX_INVALID_CONTENT_TYPE % (len(content), ", ".join(content)),
    )


def response_content_type_not_found(
    op: Operation,
    request: Request,
    response: HttpResponse,
    code: str,
    is_default: bool,
) -> ValidationError:
    """Report a response content type not defined for the code (or the default response)."""
    media_type, _, _ = extract_content_type(response.header(CONTENT_TYPE_HEADER))
    if op.responses is None:
        raise ValueError("operation defines no responses")
    definition = op.responses.default if is_default else op.responses.codes.get(code)
    if definition is None:
        which = "default response" if is_default else f"response for code {code!r}"
        raise KeyError(f"operation defines no {which}")
    content = definition.content
    return ValidationError(
        validation_type=RESPONSE_BODY_VALIDATION,
        validation_sub_type=REQUEST_BODY_CONTENT_TYPE,
        message=(
            f"{request.method} / {code} operation response content type "
            f"'{media_type}' does not exist"
        ),
        reason=(
            f"The content type '{media_type}' of the {request.method} response received has not "
            "been defined, it's an unknown type"
        ),
        spec_line=definition.content_position.line,
        spec_col=definition.content_position.column,
        context=op,
        how_to_fix=HOW_TO_FIX_INVALID_CONTENT_TYPE % (len(content), ", ".join(content)),
    )


def response_code_not_found(op: Operation, request: Request, code: int) -> ValidationError:
    """Report a response status code the operation does not define."""
    return ValidationError(
        validation_type=RESPONSE_BODY_VALIDATION,
        validation_sub_type=RESPONSE_BODY_RESPONSE_CODE,
        message=f"{request.method} operation request response code '{code}' does not exist",
        reason=(
            f"The reponse code '{code}' of the {request.method} request submitted has not "
            "been defined, it's an unknown type"
        ),
        spec_line=op.responses_position.line,
        spec_col=op.responses_position.column,
        context=op,
        how_to_fix=HOW_TO_FIX_INVALID_RESPONSE_CODE,
    )