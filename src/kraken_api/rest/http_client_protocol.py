# SPDX-License-Identifier: Apache-2.0
"""HTTP client protocol for dependency injection."""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class HttpResponse(Protocol):
    """Protocol for HTTP response objects."""

    status_code: int
    headers: Dict[str, str]
    text: str

    def json(self) -> Any:
        """Parse response as JSON."""
        ...


@runtime_checkable
class HttpClientProtocol(Protocol):
    """Protocol for HTTP client implementations.

    Lets tests inject a fake client that records requests instead of
    sending them.
    """

    def post(
        self,
        url: str,
        content: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> HttpResponse:
        """Make a synchronous POST request.

        Args:
            url: Request URL
            content: Pre-encoded request body
            headers: Request headers
            timeout: Request timeout in seconds

        Returns:
            HttpResponse: Response object with status, headers, and body
        """
        ...


@runtime_checkable
class AsyncHttpClientProtocol(Protocol):
    """Protocol for async HTTP client implementations."""

    async def post(
        self,
        url: str,
        content: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> HttpResponse:
        """Make an asynchronous POST request (same arguments as the sync one)."""
        ...


# Adapter classes to make httpx compatible with the protocol

class HttpxResponseAdapter:
    """Adapter to make httpx.Response compatible with HttpResponse protocol."""

    def __init__(self, httpx_response):
        self._response = httpx_response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._response.headers)

    @property
    def text(self) -> str:
        return self._response.text

    def json(self) -> Any:
        return self._response.json()


class HttpxClientAdapter:
    """Adapter to make httpx.Client (or the httpx module) fit HttpClientProtocol."""

    def __init__(self, httpx_client=None):
        import httpx

        self._client = httpx_client or httpx

    def post(
        self,
        url: str,
        content: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> HttpResponse:
        """Make POST request using httpx."""
        response = self._client.post(
            url=url,
            content=content,
            headers=headers,
            timeout=timeout,
        )
        return HttpxResponseAdapter(response)


class AsyncHttpxClientAdapter:
    """Adapter to make httpx.AsyncClient compatible with AsyncHttpClientProtocol.

    Without an injected client, each call opens a short-lived
    ``httpx.AsyncClient``.
    """

    def __init__(self, httpx_client=None):
        self._client = httpx_client

    async def post(
        self,
        url: str,
        content: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> HttpResponse:
        """Make async POST request using httpx."""
        if self._client is not None:
            response = await self._client.post(
                url=url,
                content=content,
                headers=headers,
                timeout=timeout,
            )
            return HttpxResponseAdapter(response)

        import httpx

        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(url=url, content=content, headers=headers)
            return HttpxResponseAdapter(response)


# Default implementations

def get_default_http_client() -> HttpClientProtocol:
    """Get default HTTP client implementation."""
    return HttpxClientAdapter()


def get_default_async_http_client() -> AsyncHttpClientProtocol:
    """Get default async HTTP client implementation."""
    return AsyncHttpxClientAdapter()


__all__ = [
    "HttpResponse",
    "HttpClientProtocol",
    "AsyncHttpClientProtocol",
    "HttpxResponseAdapter",
    "HttpxClientAdapter",
    "AsyncHttpxClientAdapter",
    "get_default_http_client",
    "get_default_async_http_client",
]
