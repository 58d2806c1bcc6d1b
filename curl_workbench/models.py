"""
Request and Response Models

Canonical structured forms exchanged between the parser, the generator,
the executor and the builder session.
"""

import json
from enum import Enum
from typing import Any, Dict, Optional, Union
from dataclasses import dataclass, field

from .exceptions import HeaderFormatError


HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")

# Only these methods carry a body in the builder
BODY_METHODS = ("POST", "PUT")


class CorsMode(str, Enum):
    """Cross-origin policy used for one execution."""
    STANDARD = "cors"
    OPAQUE = "no-cors"


@dataclass(frozen=True)
class RequestModel:
    """A fully resolved HTTP request."""
    method: str = "GET"
    url: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None

    def __post_init__(self):
        # An empty body and no body are the same request
        if self.body == "":
            object.__setattr__(self, "body", None)

    @property
    def has_body(self) -> bool:
        return self.method in BODY_METHODS and bool(self.body)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'method': self.method,
            'url': self.url,
            'headers': dict(self.headers),
            'body': self.body,
        }


@dataclass(frozen=True)
class RawHeaders:
    """Headers as typed by the user: JSON object text, possibly malformed."""
    text: str = "{}"

    def resolve(self) -> Dict[str, str]:
        try:
            parsed = json.loads(self.text)
        except (TypeError, ValueError):
            raise HeaderFormatError("Invalid headers JSON format")
        return validate_headers(parsed)

    def to_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class ParsedHeaders:
    """Headers already in ordered mapping form."""
    values: Dict[str, str] = field(default_factory=dict)

    def resolve(self) -> Dict[str, str]:
        return validate_headers(self.values)

    def to_text(self) -> str:
        return json.dumps(self.values, indent=2, ensure_ascii=False)


HeaderField = Union[RawHeaders, ParsedHeaders]


def validate_headers(value: Any) -> Dict[str, str]:
    """Check that value is a flat mapping of string to string.

    Raises:
        HeaderFormatError: for arrays, scalars, nested objects or non-string values
    """
    if not isinstance(value, dict):
        raise HeaderFormatError("Invalid headers format: expected a JSON object")

    headers = {}
    for name, header_value in value.items():
        if not isinstance(name, str) or not isinstance(header_value, str):
            raise HeaderFormatError(
                f"Invalid headers format: value for {name!r} must be a string"
            )
        headers[name] = header_value
    return headers


@dataclass
class RequestDraft:
    """Editable request state held by a builder session.

    Headers stay in whatever form the user left them until resolve() is
    called at execution time, so malformed header text is a valid state.
    """
    method: str = "GET"
    url: str = ""
    headers: HeaderField = field(default_factory=RawHeaders)
    body: str = ""

    @property
    def headers_text(self) -> str:
        return self.headers.to_text()

    def resolve(self) -> RequestModel:
        """Turn the draft into a RequestModel.

        Raises:
            HeaderFormatError: if the headers are not a flat JSON object of strings
        """
        return RequestModel(
            method=self.method,
            url=self.url,
            headers=self.headers.resolve(),
            body=self.body or None,
        )


@dataclass
class ResponseModel:
    """Displayable response produced by one execution."""
    status: Union[int, str]
    status_text: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None

    @property
    def is_opaque(self) -> bool:
        return not isinstance(self.status, int)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status,
            'statusText': self.status_text,
            'headers': self.headers,
            'body': self.body,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string"""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


@dataclass
class ExecutionResult:
    """Outcome of one execution, keyed by a monotonically increasing id."""
    request_id: int
    response: Optional[ResponseModel] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
