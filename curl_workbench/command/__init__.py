"""
Command module for converting between cURL text and requests.

- tokenizer.py: Shell-like splitting of pasted command text
- parser.py: cURL tokens to RequestModel
- generator.py: RequestModel back to cURL text
"""

from .tokenizer import tokenize, strip_quotes, collapse_continuations
from .parser import CurlParser, Parsed, Unchanged, ParseResult, parse_curl, format_body, is_curl_command
from .generator import generate_curl
