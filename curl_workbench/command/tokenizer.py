"""
Shell-like Tokenizer

Splits pasted cURL text into tokens. Quotes are kept in the tokens so the
parser can decide what to strip.
"""

import re
from typing import List


_CONTINUATION = re.compile(r'\\\r?\n\s*')

# Bare text glued to quoted spans. A closed quote may span newlines, an
# unterminated one swallows the rest of its line.
_TOKEN = re.compile(
    r"""(?:[^\s"']+|"(?:[^"]*"|[^"\n]*)|'(?:[^']*'|[^'\n]*))+"""
)


def collapse_continuations(text: str) -> str:
    """Replace backslash-newline line continuations with a single space."""
    return _CONTINUATION.sub(' ', text)


def tokenize(text: str) -> List[str]:
    """
    Split raw command text into tokens.

    Args:
        text: Raw text, possibly spread over several lines

    Returns:
        List of tokens in input order. Never raises.
    """
    if not text:
        return []
    command = collapse_continuations(text).strip()
    return _TOKEN.findall(command)


def strip_quotes(token: str) -> str:
    """Remove one leading and one trailing quote character, if present."""
    if token[:1] in ('"', "'"):
        token = token[1:]
    if token[-1:] in ('"', "'"):
        token = token[:-1]
    return token
