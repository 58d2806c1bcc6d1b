"""
Response Normalizer

Shapes a transport response into a displayable ResponseModel. Decoding
never fails: anything that is not JSON is kept as raw text.
"""

import json
from typing import Any, Dict

import httpx

from .models import ResponseModel


JSON_CONTENT_TYPE = "application/json"


def collect_headers(response: httpx.Response) -> Dict[str, str]:
    """Lowercased header names in arrival order, repeats comma-joined."""
    return dict(response.headers.items())


def decode_body(response: httpx.Response) -> Any:
    """
    Decode the response body.

    JSON-labelled responses are decoded directly. Everything else is read as
    text and decoded opportunistically, so a server that mislabels JSON as
    text/plain still yields structured data.
    """
    content_type = response.headers.get("content-type", "")

    if JSON_CONTENT_TYPE in content_type.lower():
        try:
            return response.json()
        except ValueError:
            pass

    text = response.text
    try:
        return json.loads(text)
    except ValueError:
        return text


def normalize_response(response: httpx.Response) -> ResponseModel:
    """Build a ResponseModel from an httpx response."""
    return ResponseModel(
        status=response.status_code,
        status_text=response.reason_phrase,
        headers=collect_headers(response),
        body=decode_body(response),
    )
