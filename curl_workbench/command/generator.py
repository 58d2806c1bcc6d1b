"""
Curl Command Generator

Serializes a RequestModel back into a cURL command for sharing.
"""

from typing import List

from ..models import RequestModel


def quote(value: str) -> str:
    """Single-quote a value for a POSIX shell."""
    return "'" + value.replace("'", "'\\''") + "'"


def generate_curl(request: RequestModel) -> str:
    """
    Build a curl command from a request.

    Args:
        request: The request to serialize

    Returns:
        Command of the form curl '<url>' -X <method> -H '<name>: <value>' -d '<body>'.
        Parsing it back gives the same request as long as no value contains a
        single quote and header names and values carry no surrounding spaces.
    """
    parts: List[str] = ["curl", quote(request.url), "-X", request.method]

    for name, value in request.headers.items():
        parts.extend(["-H", quote(f"{name}: {value}")])

    if request.body:
        parts.extend(["-d", quote(request.body)])

    return " ".join(parts)
