# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, Optional

import httpx

from kraken_api.exceptions import NetworkError, TransportError
from kraken_api.metrics import ERRORS, LATENCY, REQUESTS
from kraken_api.security.mask import mask_body, mask_headers, safe_for_log

from .http_client_protocol import (
    AsyncHttpClientProtocol,
    HttpClientProtocol,
    HttpResponse,
    get_default_async_http_client,
    get_default_http_client,
)
from .models import PreparedRequest


class _TransportBase:
    def __init__(
        self,
        secrets: tuple[str, ...] = (),
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._secrets = secrets
        self.log = logger or logging.getLogger(self.__class__.__name__)

    def _log_request(self, request: PreparedRequest) -> None:
        if self.log.isEnabledFor(logging.DEBUG):
            self.log.debug(
                "POST %s headers=%s body=%s",
                request.url,
                mask_headers(request.headers),
                mask_body(request.body, "otp"),
            )

    def _count(self, request: PreparedRequest) -> None:
        # Includes attempts that never get a response
        REQUESTS.labels(
            method=request.method.wire_name, access=request.method.access.value
        ).inc()

    def _observe(self, request: PreparedRequest, started: float) -> None:
        LATENCY.labels(method=request.method.wire_name).observe(time.perf_counter() - started)

    def _network_error(
        self, request: PreparedRequest, started: float, exc: httpx.TransportError
    ) -> NetworkError:
        name = request.method.wire_name
        kind = "timeout" if isinstance(exc, httpx.TimeoutException) else "network"
        LATENCY.labels(method=name).observe(time.perf_counter() - started)
        ERRORS.labels(method=name, kind=kind).inc()
        msg = safe_for_log(f"Error in server response for {name}: {exc!r}", *self._secrets)
        self.log.warning(msg)
        return NetworkError(msg)

    def _parse(self, request: PreparedRequest, response: HttpResponse) -> Dict[str, Any]:
        name = request.method.wire_name
        if response.status_code >= 400:
            self.log.info("%s answered HTTP %d", name, response.status_code)

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            ERRORS.labels(method=name, kind="transport").inc()
            text = response.text
            self.log.warning(
                "Failed to parse JSON response: %s. Status: %s, Text: %s",
                e,
                response.status_code,
                text[:200],
            )
            raise TransportError(
                f"Could not understand response from server: {text}", body=text
            ) from e

        if not isinstance(data, dict):
            ERRORS.labels(method=name, kind="transport").inc()
            raise TransportError(
                f"Expected a JSON object from server, got {type(data).__name__}",
                body=response.text,
            )
        return data


class Transport(_TransportBase):
    """Blocking POST + JSON decoding. No retries."""

    def __init__(
        self,
        http_client: Optional[HttpClientProtocol] = None,
        secrets: tuple[str, ...] = (),
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(secrets=secrets, logger=logger)
        self.http_client = http_client or get_default_http_client()

    def send(self, request: PreparedRequest) -> Dict[str, Any]:
        """Send ``request`` and return the decoded JSON object.

        Raises:
            NetworkError: Connection failure or timeout.
            TransportError: Body is not a JSON object.
        """
        self._log_request(request)
        self._count(request)
        started = time.perf_counter()
        try:
            response = self.http_client.post(
                request.url,
                content=request.body,
                headers=request.headers,
                timeout=request.timeout,
            )
        except httpx.TransportError as e:
            raise self._network_error(request, started, e) from e

        self._observe(request, started)
        return self._parse(request, response)


class AsyncTransport(_TransportBase):
    """Async twin of :class:`Transport`."""

    def __init__(
        self,
        http_client: Optional[AsyncHttpClientProtocol] = None,
        secrets: tuple[str, ...] = (),
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(secrets=secrets, logger=logger)
        self.http_client = http_client or get_default_async_http_client()

    async def send(self, request: PreparedRequest) -> Dict[str, Any]:
        self._log_request(request)
        self._count(request)
        started = time.perf_counter()
        try:
            response = await self.http_client.post(
                request.url,
                content=request.body,
                headers=request.headers,
                timeout=request.timeout,
            )
        except httpx.TransportError as e:
            raise self._network_error(request, started, e) from e

        self._observe(request, started)
        return self._parse(request, response)


__all__ = ["Transport", "AsyncTransport"]
