"""
Request Workbench

Turns a bare URL or a pasted cURL command into a structured request,
executes it, and serializes requests back into cURL text.

Quick start (library usage):
    import asyncio
    from curl_workbench import BuilderSession

    session = BuilderSession()
    session.handle_input("curl 'https://httpbin.org/post' -d '{\"a\": 1}'")
    result = asyncio.run(session.execute())
    print(result.response.status, result.response.body)
    print(session.copy_as_curl())
"""

from .builder import BuilderSession, InputMode
from .command import Parsed, Unchanged, parse_curl, generate_curl, tokenize
from .config_manager import ExecutorConfig
from .executor import RequestExecutor
from .models import CorsMode, ExecutionResult, RequestModel, ResponseModel

__version__ = "1.0.0"
__all__ = [
    "BuilderSession",
    "InputMode",
    "Parsed",
    "Unchanged",
    "parse_curl",
    "generate_curl",
    "tokenize",
    "ExecutorConfig",
    "RequestExecutor",
    "CorsMode",
    "ExecutionResult",
    "RequestModel",
    "ResponseModel",
    "ApiClient",
    "app",
]


def __getattr__(name):
    """Lazy imports for the HTTP-facing pieces.

    The API client and the FastAPI app are only needed by callers that talk
    to a backend or serve the workbench; deferring them keeps FastAPI out of
    the import chain for plain parsing use.
    """
    if name == "ApiClient":
        from .client import ApiClient
        return ApiClient
    if name == "app":
        from .server import app
        return app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
