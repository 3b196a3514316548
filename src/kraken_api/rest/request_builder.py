# SPDX-License-Identifier: Apache-2.0
"""Turns an operation name and its params into a ready-to-send POST."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from kraken_api.exceptions import UnknownMethodError

from .auth import AuthStrategy, KrakenSignatureAuth, NoAuth
from .methods import Access, ApiMethod
from .models import ClientConfig, PreparedRequest
from .nonce import NonceSource
from .signer import SignatureScheme, encode_params

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class RequestBuilder:
    """Builds public and private requests for one client configuration.

    Usage:
        >>> cfg = ClientConfig(api_key="key", api_secret="c2VjcmV0")
        >>> request = RequestBuilder(cfg).build("Ticker", {"pair": "XXBTZUSD"})
        >>> request.url
        'https://api.kraken.com/0/public/Ticker'
    """

    def __init__(
        self,
        config: ClientConfig,
        nonce_source: Optional[NonceSource] = None,
        signature_scheme: SignatureScheme = SignatureScheme.RAW_DIGEST,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config
        self.public_auth: AuthStrategy = NoAuth()
        self.private_auth: AuthStrategy = KrakenSignatureAuth(
            config.api_key,
            config.api_secret,
            otp=config.otp,
            nonce_source=nonce_source,
            scheme=signature_scheme,
        )
        self.log = logger or logging.getLogger(self.__class__.__name__)

    def path_for(self, method: ApiMethod) -> str:
        return f"/{self.config.version}/{method.access.value}/{method.wire_name}"

    def build(
        self,
        method: Union[str, ApiMethod],
        params: Optional[Mapping[str, Any]] = None,
        access: Optional[Access] = None,
    ) -> PreparedRequest:
        """Resolve ``method`` and build its request.

        Args:
            method: Operation name or :class:`ApiMethod`.
            params: POST params; copied, never mutated.
            access: When given, the method must belong to this access class.

        Raises:
            UnknownMethodError: Unknown name, or access class mismatch.
            InvalidCredentialError: Private call with a malformed secret.
        """
        api_method = ApiMethod.lookup(method)
        if access is not None and api_method.access is not access:
            raise UnknownMethodError(
                api_method.name,
                f"{api_method.name} is not a {access.value} API method.",
            )

        path = self.path_for(api_method)
        body_params: dict[str, Any] = dict(params or {})
        headers = {
            "User-Agent": self.config.user_agent,
            "Content-Type": FORM_CONTENT_TYPE,
        }

        auth = self.private_auth if api_method.is_private else self.public_auth
        auth.apply(path, headers, body_params)

        self.log.debug("Built %s request for %s", api_method.access.value, path)
        return PreparedRequest(
            method=api_method,
            url=f"{self.config.base_url}{path}",
            path=path,
            body=encode_params(body_params),
            timeout=self.config.timeout,
            headers=headers,
        )


__all__ = ["RequestBuilder", "FORM_CONTENT_TYPE"]
