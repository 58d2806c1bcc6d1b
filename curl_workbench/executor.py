"""
Request Executor

Issues the network call described by a request under a chosen cross-origin
policy and returns a ResponseModel. One call per invocation, no retries.
"""

import json
import logging
from typing import Dict, Optional, Union

import httpx

from . import config
from .config_manager import ExecutorConfig
from .exceptions import HeaderFormatError, TransportError
from .models import CorsMode, RequestDraft, RequestModel, ResponseModel
from .normalizer import normalize_response

logger = logging.getLogger(__name__)


def opaque_response() -> ResponseModel:
    """Placeholder returned for no-cors executions, whose content is unreadable."""
    return ResponseModel(
        status=config.OPAQUE_STATUS,
        status_text=config.OPAQUE_STATUS_TEXT,
        headers={},
        body=config.OPAQUE_BODY,
    )


def encode_body(body: str) -> str:
    """Re-serialize a JSON body compactly; send anything else verbatim."""
    try:
        return json.dumps(json.loads(body), separators=(',', ':'), ensure_ascii=False)
    except ValueError:
        return body


def _drop_header(headers: Dict[str, str], name: str):
    for key in [k for k in headers if k.lower() == name.lower()]:
        del headers[key]


class RequestExecutor:
    """Executes requests built in the workbench.

    The executor owns a cookie jar that is shared by every execution when
    ``include_credentials`` is on, mirroring a browser's cookie store.

    Args:
        executor_config: Origin, credentials, timeout and proxy settings.
                         Defaults come from config.py / WORKBENCH_* env vars.
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
    """

    def __init__(
        self,
        executor_config: Optional[ExecutorConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = executor_config or ExecutorConfig()
        self._transport = transport
        self._cookies = httpx.Cookies()

    def build_headers(self, request: RequestModel) -> Dict[str, str]:
        """Headers actually sent: the request's own plus the policy overrides."""
        headers = dict(request.headers)

        if self.config.origin:
            _drop_header(headers, "Origin")
            headers["Origin"] = self.config.origin

        if not self.config.include_credentials:
            _drop_header(headers, "Cookie")

        for name, value in headers.items():
            try:
                name.encode("ascii")
                value.encode("ascii")
            except UnicodeEncodeError:
                raise HeaderFormatError(
                    f"Invalid header {name!r}: names and values must be ASCII"
                )

        return headers

    def _client(self) -> httpx.AsyncClient:
        kwargs = {
            'timeout': self.config.timeout,
            'follow_redirects': self.config.follow_redirects,
        }
        if self.config.include_credentials:
            kwargs['cookies'] = self._cookies
        if self._transport is not None:
            kwargs['transport'] = self._transport
        elif self.config.proxy_url:
            kwargs['proxy'] = self.config.proxy_url
        return httpx.AsyncClient(**kwargs)

    async def execute(
        self,
        request: Union[RequestModel, RequestDraft],
        mode: Union[CorsMode, str] = CorsMode.STANDARD,
    ) -> ResponseModel:
        """
        Execute a request.

        Args:
            request: A resolved request, or a builder draft whose headers are
                     validated here before anything is sent
            mode: CorsMode.STANDARD for a readable response, CorsMode.OPAQUE
                  for a no-cors call whose response is discarded

        Returns:
            ResponseModel. Non-2xx statuses are returned, not raised.

        Raises:
            HeaderFormatError: headers are not a flat JSON object of ASCII
                               strings (no call is made)
            TransportError: the network call failed
        """
        mode = CorsMode(mode)
        if isinstance(request, RequestDraft):
            request = request.resolve()

        headers = self.build_headers(request)
        content = encode_body(request.body) if request.has_body else None

        logger.info("%s %s (%s)", request.method, request.url, mode.value)

        async with self._client() as client:
            try:
                response = await client.request(
                    request.method,
                    request.url,
                    headers=headers,
                    content=content,
                )
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.warning("request to %s failed: %s", request.url, e)
                raise TransportError(str(e) or "Failed to execute request") from e

            if self.config.include_credentials:
                self._cookies.update(client.cookies)

        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)

        if mode is CorsMode.OPAQUE:
            return opaque_response()

        return normalize_response(response)


async def execute_request(
    request: Union[RequestModel, RequestDraft],
    mode: Union[CorsMode, str] = CorsMode.STANDARD,
    executor_config: Optional[ExecutorConfig] = None,
) -> ResponseModel:
    """Convenience function to execute a single request."""
    executor = RequestExecutor(executor_config)
    return await executor.execute(request, mode)
