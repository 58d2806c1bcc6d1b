"""
Curl Command Parser

Turns a pasted cURL command into a RequestModel. Parsing is best effort:
unknown flags are skipped and garbled input still yields whatever could be
extracted. The parser never raises; callers get a tagged ParseResult.
"""

import json
import logging
from typing import Dict, List, Sequence, Union
from dataclasses import dataclass

from ..models import HTTP_METHODS, RequestModel
from .tokenizer import tokenize, strip_quotes

logger = logging.getLogger(__name__)


PROGRAM_NAME = "curl"

METHOD_FLAGS = ("-X", "--request")
HEADER_FLAGS = ("-H", "--header")
DATA_FLAGS = (
    "-d",
    "--data",
    "--data-raw",
    "--data-binary",
    "--data-ascii",
    "--data-urlencode",
)


@dataclass(frozen=True)
class Parsed:
    """The input was a cURL command and produced a request."""
    request: RequestModel


@dataclass(frozen=True)
class Unchanged:
    """Nothing usable was extracted; callers keep their current fields."""
    reason: str = ""


ParseResult = Union[Parsed, Unchanged]


def is_curl_command(text: str) -> bool:
    """Check whether the leading word of text is the curl program name."""
    words = text.split(None, 1)
    return bool(words) and words[0].casefold() == PROGRAM_NAME


class CurlParser:
    """Parser for curl commands"""

    def parse(self, command: Union[str, Sequence[str]]) -> ParseResult:
        """
        Parse a curl command into a request.

        Args:
            command: The full curl command as a string, or its tokens

        Returns:
            Parsed with the request, or Unchanged when the input is not a
            curl command or could not be read at all
        """
        try:
            tokens = tokenize(command) if isinstance(command, str) else list(command)
            if not tokens or strip_quotes(tokens[0]).casefold() != PROGRAM_NAME:
                return Unchanged("not a curl command")
            if len(tokens) == 1:
                return Unchanged("empty curl command")
            return Parsed(self._parse_tokens(tokens[1:]))
        except Exception as e:
            logger.debug("curl parse failed: %s", e, exc_info=True)
            return Unchanged(str(e))

    def _parse_tokens(self, tokens: List[str]) -> RequestModel:
        method = "GET"
        method_explicit = False
        url = ""
        headers: Dict[str, str] = {}
        body = ""

        i = 0
        while i < len(tokens):
            token = tokens[i]

            if not token.startswith("-") and not url:
                url = strip_quotes(token)

            elif token in METHOD_FLAGS:
                i += 1
                if i < len(tokens):
                    verb = strip_quotes(tokens[i]).upper()
                    # Verbs outside the builder's set keep the current method
                    if verb in HTTP_METHODS:
                        method = verb
                        method_explicit = True

            elif token in HEADER_FLAGS:
                i += 1
                if i < len(tokens):
                    self._add_header(headers, strip_quotes(tokens[i]))

            elif token in DATA_FLAGS:
                i += 1
                if i < len(tokens):
                    body = strip_quotes(tokens[i])
                    # curl infers POST from data unless -X came first
                    if not method_explicit:
                        method = "POST"

            i += 1

        return RequestModel(method=method, url=url, headers=headers, body=body or None)

    def _add_header(self, headers: Dict[str, str], raw: str):
        """Split 'Name: value' on the first colon; no colon is a no-op."""
        if ':' not in raw:
            return
        name, value = raw.split(':', 1)
        headers[name.strip()] = value.strip()


def format_body(body: str) -> str:
    """Pretty-print a JSON body with 2-space indent, or return it unchanged."""
    if not body:
        return body
    try:
        return json.dumps(json.loads(body), indent=2, ensure_ascii=False)
    except ValueError:
        return body


def parse_curl(command: Union[str, Sequence[str]]) -> ParseResult:
    """Convenience function to parse a curl command."""
    parser = CurlParser()
    return parser.parse(command)
