"""A minimal OpenAPI 3 document model and HTTP message types used by the validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Position:
    """A line and column inside the specification document (0 when unknown)."""

    line: int = 0
    column: int = 0


@dataclass
class Schema:
    """The parts of a JSON schema that parameter validation looks at."""

    type: list[str] = field(default_factory=list)
    enum: list[Any] | None = None
    items: Schema | None = None
    properties: dict[str, Schema] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    type_position: Position = field(default_factory=Position)
    enum_position: Position = field(default_factory=Position)

    def __post_init__(self) -> None:
        if isinstance(self.type, str):
            self.type = [self.type]


@dataclass
class MediaType:
    """A media type entry of a content map."""

    schema: Schema | None = None
    position: Position = field(default_factory=Position)


@dataclass
class Parameter:
    """An operation or path level parameter."""

    name: str
    location: str
    required: bool = False
    style: str = ""
    explode: bool | None = None
    allow_reserved: bool = False
    schema: Schema | None = None
    content: dict[str, MediaType] = field(default_factory=dict)
    required_position: Position = field(default_factory=Position)
    style_position: Position = field(default_factory=Position)
    explode_position: Position = field(default_factory=Position)
    schema_position: Position = field(default_factory=Position)

    def is_exploded(self) -> bool:
        """Return True only when explode is explicitly set to true."""
        return bool(self.explode)


@dataclass
class RequestBody:
    """An operation request body."""

    content: dict[str, MediaType] = field(default_factory=dict)
    content_position: Position = field(default_factory=Position)


@dataclass
class Response:
    """A single response definition."""

    content: dict[str, MediaType] = field(default_factory=dict)
    content_position: Position = field(default_factory=Position)


@dataclass
class Responses:
    """The responses of an operation, keyed by status code."""

    codes: dict[str, Response] = field(default_factory=dict)
    default: Response | None = None


@dataclass
class Operation:
    """An operation bound to one HTTP method."""

    operation_id: str = ""
    parameters: list[Parameter] = field(default_factory=list)
    request_body: RequestBody | None = None
    responses: Responses | None = None
    responses_position: Position = field(default_factory=Position)


@dataclass
class PathItem:
    """A path entry with its operations and shared parameters."""

    get: Operation | None = None
    post: Operation | None = None
    put: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    parameters: list[Parameter] = field(default_factory=list)


def _lookup_header(headers: Mapping[str, str], name: str) -> str:
    wanted = name.lower()
    return next((value for key, value in headers.items() if key.lower() == wanted), "")


@dataclass
class Request:
    """An incoming HTTP request."""

    method: str
    path: str = "/"
    headers: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)
    query: str = ""

    def header(self, name: str) -> str:
        """Return the header value matched case-insensitively, or an empty string."""
        return _lookup_header(self.headers, name)


@dataclass
class HttpResponse:
    """An outgoing HTTP response."""

    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)

    def header(self, name: str) -> str:
        """Return the header value matched case-insensitively, or an empty string."""
        return _lookup_header(self.headers, name)