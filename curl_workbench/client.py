"""
Generic API Client

JSON-over-HTTP verb helpers used by the dashboard's data pages. Every
non-2xx answer raises ApiError carrying the status text.

Usage:
    with ApiClient(token="...") as api:
        posts = api.get("/posts")
        api.put("/posts", 3, {"title": "Updated"})
"""

import logging
from typing import Any, Dict, Optional, Union

import httpx

from . import config
from .exceptions import ApiError, TransportError

logger = logging.getLogger(__name__)

ResourceId = Union[str, int]


class ApiClient:
    """HTTP verb client bound to one base URL.

    Args:
        base_url: Prefix for every endpoint. Falls back to WORKBENCH_API_URL.
        token: Bearer token added as Authorization header when set.
               Falls back to WORKBENCH_API_TOKEN.
        origin: Optional Origin header value.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        origin: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url or config.API_BASE_URL
        self.token = token if token is not None else config.API_TOKEN
        self.origin = origin
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        self._client.close()

    @property
    def headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.origin:
            headers["Origin"] = self.origin
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _url(self, endpoint: str, resource_id: Optional[ResourceId] = None) -> str:
        url = f"{self.base_url}{endpoint}"
        if resource_id is not None:
            url = f"{url}/{resource_id}"
        return url

    def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(str(e)) from e

        if not response.is_success:
            raise ApiError(response.reason_phrase, response.status_code)
        return response

    def get(self, endpoint: str) -> Any:
        return self._send("GET", self._url(endpoint), headers=self.headers).json()

    def get_by_id(self, endpoint: str, resource_id: ResourceId) -> Any:
        return self._send("GET", self._url(endpoint, resource_id), headers=self.headers).json()

    def post(self, endpoint: str, data: Any) -> Any:
        return self._send("POST", self._url(endpoint), headers=self.headers, json=data).json()

    def put(self, endpoint: str, resource_id: ResourceId, data: Any) -> Any:
        response = self._send(
            "PUT", self._url(endpoint, resource_id), headers=self.headers, json=data
        )
        return response.json()

    def patch(self, endpoint: str, resource_id: ResourceId, data: Any) -> Any:
        response = self._send(
            "PATCH", self._url(endpoint, resource_id), headers=self.headers, json=data
        )
        return response.json()

    def delete(self, endpoint: str, resource_id: ResourceId) -> None:
        self._send("DELETE", self._url(endpoint, resource_id), headers=self.headers)

    def post_form(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Multipart submission. Content-Type is left to the transport so it
        can add the boundary."""
        headers = {k: v for k, v in self.headers.items() if k != "Content-Type"}
        response = self._send(
            "POST", self._url(endpoint), headers=headers, data=data, files=files
        )
        return response.json()
