"""
Builder Session

The editing state behind the request workbench: the free-text field with
its URL/cURL input mode detection, direct field edits, execution with a
single displayed result, and the copy-as-cURL action.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Union

from .command import Parsed, ParseResult, format_body, generate_curl, is_curl_command, parse_curl
from .exceptions import WorkbenchError
from .executor import RequestExecutor
from .models import (
    HTTP_METHODS,
    CorsMode,
    ExecutionResult,
    ParsedHeaders,
    RawHeaders,
    RequestDraft,
    RequestModel,
)

logger = logging.getLogger(__name__)


class InputMode(str, Enum):
    """How the free-text field was interpreted."""
    URL = "url"
    CURL = "curl"


class BuilderSession:
    """One request builder.

    Each execute() call gets a monotonically increasing request id. Only a
    completion with a higher id than the one on display replaces it, so a
    slow earlier request can never overwrite a later one.

    Args:
        executor: RequestExecutor used for execute(). A default one is
                  created when omitted.
        mode: Initial cross-origin policy.
    """

    def __init__(
        self,
        executor: Optional[RequestExecutor] = None,
        mode: Union[CorsMode, str] = CorsMode.STANDARD,
    ):
        self.executor = executor or RequestExecutor()
        self.draft = RequestDraft()
        self.mode = CorsMode(mode)
        self.result: Optional[ExecutionResult] = None
        self._next_id = 0
        self._pending: List[int] = []
        self.last_parse: Optional[ParseResult] = None

    # Input mode detection

    def handle_input(self, text: str) -> InputMode:
        """
        Route a change of the URL-or-cURL field.

        A leading ``curl`` word re-parses the whole text from scratch and, if
        the parse produced a request, overwrites every field. Anything else
        is taken verbatim as the URL, leaving the other fields alone.
        """
        if not is_curl_command(text.strip()):
            self.draft.url = text
            return InputMode.URL

        result = parse_curl(text)
        self.last_parse = result
        if isinstance(result, Parsed):
            self.load(result.request)
        else:
            logger.debug("cURL input left fields unchanged: %s", result.reason)
        return InputMode.CURL

    def load(self, request: RequestModel):
        """Replace every field with the values of a parsed request."""
        self.draft = RequestDraft(
            method=request.method or "GET",
            url=request.url or "",
            headers=ParsedHeaders(dict(request.headers)),
            body=format_body(request.body) if request.body else "",
        )

    # Direct field edits

    def set_method(self, method: str):
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported method: {method}")
        self.draft.method = method

    def set_url(self, url: str):
        self.draft.url = url

    def set_headers_text(self, text: str):
        """Store headers as typed; validation waits until execution."""
        self.draft.headers = RawHeaders(text)

    def set_headers(self, headers: Dict[str, str]):
        self.draft.headers = ParsedHeaders(dict(headers))

    def set_body(self, body: str):
        self.draft.body = body

    def set_mode(self, mode: Union[CorsMode, str]):
        self.mode = CorsMode(mode)

    @property
    def headers_text(self) -> str:
        return self.draft.headers_text

    # Execution

    @property
    def in_progress(self) -> bool:
        return bool(self._pending)

    @property
    def response(self):
        return self.result.response if self.result else None

    @property
    def error(self) -> Optional[str]:
        return self.result.error if self.result else None

    async def execute(self) -> ExecutionResult:
        """
        Execute the current draft.

        Failures never raise: they are recorded as the error message of the
        returned ExecutionResult. The result becomes the displayed one only
        if no later execution has completed first.
        """
        self._next_id += 1
        request_id = self._next_id
        self._pending.append(request_id)

        try:
            response = await self.executor.execute(self.draft, self.mode)
            result = ExecutionResult(request_id, response=response)
        except WorkbenchError as e:
            result = ExecutionResult(request_id, error=str(e) or "Failed to execute request")
        finally:
            self._pending.remove(request_id)

        if self.result is None or request_id > self.result.request_id:
            self.result = result
        else:
            logger.debug(
                "discarding stale result %d (showing %d)", request_id, self.result.request_id
            )
        return result

    # Copy

    def copy_as_curl(self) -> str:
        """
        cURL text for the current draft.

        Raises:
            HeaderFormatError: if the headers text is not valid JSON
        """
        return generate_curl(self.draft.resolve())
