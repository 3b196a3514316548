# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from pydantic import ValidationError

from kraken_api.exceptions import ConfigurationError, KrakenError
from kraken_api.metrics import ERRORS
from kraken_api.security.mask import safe_for_log

from .http_client_protocol import AsyncHttpClientProtocol, HttpClientProtocol
from .methods import Access, ApiMethod
from .models import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_USER_AGENT,
    ClientConfig,
    PreparedRequest,
)
from .nonce import NonceSource
from .request_builder import RequestBuilder
from .response import classify_response
from .signer import SignatureScheme, sign
from .transport import AsyncTransport, Transport

if TYPE_CHECKING:
    from kraken_api.settings import KrakenSettings

Params = Optional[Mapping[str, Any]]
ApiResponse = Dict[str, Any]


class KrakenClient:
    """Client for the Kraken REST API.

    Every call returns the parsed response object, e.g.
    ``{"error": [], "result": {...}}``, or raises a
    :class:`~kraken_api.exceptions.KrakenError` subclass.

    Usage:
        >>> client = KrakenClient(key, secret)
        >>> client.api("Ticker", {"pair": "XXBTZUSD"})["result"]
        >>> await client.async_api("Balance")

    Args:
        key: API key.
        secret: Base64 API secret.
        otp: Two-factor password added to every private call. For backwards
            compatibility it may be passed as the third positional argument.
        timeout_ms: Per-request timeout in milliseconds.
        base_url: API host.
        version: API version segment of the path.
        user_agent: ``User-Agent`` header value.
        nonce_source: Callable producing nonces; defaults to the shared
            microsecond clock.
        signature_scheme: Signature variant, raw digest unless talking to
            an older API revision.
        http_client: Sync HTTP client (see ``HttpClientProtocol``).
        async_http_client: Async HTTP client.
        logger: Logger; defaults to one named after the class.

    Raises:
        ConfigurationError: Missing key/secret or invalid options.
    """

    def __init__(
        self,
        key: str,
        secret: str,
        otp: Optional[str] = None,
        *,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        base_url: str = DEFAULT_BASE_URL,
        version: int = DEFAULT_API_VERSION,
        user_agent: str = DEFAULT_USER_AGENT,
        nonce_source: Optional[NonceSource] = None,
        signature_scheme: SignatureScheme = SignatureScheme.RAW_DIGEST,
        http_client: Optional[HttpClientProtocol] = None,
        async_http_client: Optional[AsyncHttpClientProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        try:
            config = ClientConfig(
                api_key=key,
                api_secret=secret,
                otp=otp,
                base_url=base_url,
                version=version,
                timeout_ms=timeout_ms,
                user_agent=user_agent,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid client configuration: {e}") from e

        self._setup(
            config,
            nonce_source=nonce_source,
            signature_scheme=signature_scheme,
            http_client=http_client,
            async_http_client=async_http_client,
            logger=logger,
        )

    def _setup(
        self,
        config: ClientConfig,
        nonce_source: Optional[NonceSource],
        signature_scheme: SignatureScheme,
        http_client: Optional[HttpClientProtocol],
        async_http_client: Optional[AsyncHttpClientProtocol],
        logger: Optional[logging.Logger],
    ) -> None:
        self.config = config
        self.signature_scheme = signature_scheme
        self.log = logger or logging.getLogger(self.__class__.__name__)
        secrets = (config.api_key, config.api_secret)

        self.builder = RequestBuilder(
            config,
            nonce_source=nonce_source,
            signature_scheme=signature_scheme,
            logger=self.log,
        )
        self.transport = Transport(http_client, secrets=secrets, logger=self.log)
        self.async_transport = AsyncTransport(async_http_client, secrets=secrets, logger=self.log)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "KrakenClient":
        """Build a client around an existing :class:`ClientConfig`.

        ``kwargs`` accepts the dependency options of ``__init__``
        (``nonce_source``, ``signature_scheme``, ``http_client``,
        ``async_http_client``, ``logger``).
        """
        client = cls.__new__(cls)
        client._setup(
            config,
            nonce_source=kwargs.pop("nonce_source", None),
            signature_scheme=kwargs.pop("signature_scheme", SignatureScheme.RAW_DIGEST),
            http_client=kwargs.pop("http_client", None),
            async_http_client=kwargs.pop("async_http_client", None),
            logger=kwargs.pop("logger", None),
        )
        if kwargs:
            raise TypeError(f"Unexpected options: {', '.join(sorted(kwargs))}")
        return client

    @classmethod
    def from_settings(
        cls, settings: Optional["KrakenSettings"] = None, **kwargs: Any
    ) -> "KrakenClient":
        """Build a client from ``KRAKEN_*`` environment settings."""
        from kraken_api.settings import load_settings

        settings = settings or load_settings()
        return cls.from_config(settings.to_client_config(), **kwargs)

    # ---------- dispatch ----------
    def api(self, method: Union[str, ApiMethod], params: Params = None) -> ApiResponse:
        """Call a public or private operation by name (blocking)."""
        return self._call(self.builder.build(method, params))

    async def async_api(self, method: Union[str, ApiMethod], params: Params = None) -> ApiResponse:
        """Async version of :meth:`api`."""
        return await self._async_call(self.builder.build(method, params))

    def public_method(self, method: Union[str, ApiMethod], params: Params = None) -> ApiResponse:
        return self._call(self.builder.build(method, params, access=Access.PUBLIC))

    def private_method(self, method: Union[str, ApiMethod], params: Params = None) -> ApiResponse:
        return self._call(self.builder.build(method, params, access=Access.PRIVATE))

    async def async_public_method(
        self, method: Union[str, ApiMethod], params: Params = None
    ) -> ApiResponse:
        return await self._async_call(self.builder.build(method, params, access=Access.PUBLIC))

    async def async_private_method(
        self, method: Union[str, ApiMethod], params: Params = None
    ) -> ApiResponse:
        return await self._async_call(self.builder.build(method, params, access=Access.PRIVATE))

    def get_message_signature(self, path: str, params: Mapping[str, Any], nonce: Any) -> str:
        """Signature this client would send for ``params`` on ``path``."""
        return sign(path, params, self.config.api_secret, nonce, self.signature_scheme)

    # ---------- helpers ----------
    def _call(self, request: PreparedRequest) -> ApiResponse:
        payload = self.transport.send(request)
        return self._classify(request, payload)

    async def _async_call(self, request: PreparedRequest) -> ApiResponse:
        payload = await self.async_transport.send(request)
        return self._classify(request, payload)

    def _classify(self, request: PreparedRequest, payload: ApiResponse) -> ApiResponse:
        try:
            return classify_response(payload)
        except KrakenError as e:
            ERRORS.labels(method=request.method.wire_name, kind="exchange").inc()
            self.log.warning(
                safe_for_log(
                    f"{request.method.wire_name} failed: {e}",
                    self.config.api_key,
                    self.config.api_secret,
                )
            )
            raise

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(base_url={self.config.base_url!r}, "
            f"version={self.config.version})"
        )


__all__ = ["KrakenClient"]
