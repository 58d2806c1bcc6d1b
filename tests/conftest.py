import json

import httpx
import pytest

from curl_workbench.config_manager import ExecutorConfig
from curl_workbench.executor import RequestExecutor


class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status=200, headers=None, content=b'', exc=None):
        self.status = status
        self.headers = headers or {}
        self.content = content
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status, headers=self.headers, content=self.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder():
    return Recorder(
        headers={'Content-Type': 'application/json'},
        content=json.dumps({'ok': True}).encode(),
    )


@pytest.fixture
def make_executor():
    def _make(handler, **config_kwargs):
        config_kwargs.setdefault('origin', 'https://www.smythstoys.com')
        config_kwargs.setdefault('timeout', None)
        return RequestExecutor(
            ExecutorConfig(**config_kwargs),
            transport=httpx.MockTransport(handler),
        )
    return _make


@pytest.fixture
def make_recorder():
    return Recorder
