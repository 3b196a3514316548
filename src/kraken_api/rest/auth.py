from __future__ import annotations

# SPDX-License-Identifier: Apache-2.0
import abc
from typing import Any, Optional

from .nonce import NonceSource, default_nonce_source
from .signer import SignatureScheme, sign


class AuthStrategy(abc.ABC):
    """Base class for authentication strategies."""

    @abc.abstractmethod
    def apply(self, path: str, headers: dict[str, str], params: dict[str, Any]) -> None:
        """Add auth information to request headers or params."""
        ...


class NoAuth(AuthStrategy):
    """Public market-data calls carry no credentials."""

    def apply(self, path: str, headers: dict[str, str], params: dict[str, Any]) -> None:
        return None


class KrakenSignatureAuth(AuthStrategy):
    """API-Key / API-Sign header auth for private calls.

    Injects ``nonce`` (unless the caller set one) and ``otp`` into ``params``
    before signing, so the signature covers the final body.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        otp: Optional[str] = None,
        nonce_source: Optional[NonceSource] = None,
        scheme: SignatureScheme = SignatureScheme.RAW_DIGEST,
    ) -> None:
        self.api_key = api_key
        self.api_secret = api_secret
        self.otp = otp
        self.nonce_source = nonce_source or default_nonce_source()
        self.scheme = scheme

    def apply(self, path: str, headers: dict[str, str], params: dict[str, Any]) -> None:
        if params.get("nonce") in (None, ""):
            params["nonce"] = self.nonce_source()
        if self.otp is not None:
            params["otp"] = self.otp

        headers["API-Key"] = self.api_key
        headers["API-Sign"] = sign(path, params, self.api_secret, params["nonce"], self.scheme)


__all__ = ["AuthStrategy", "NoAuth", "KrakenSignatureAuth"]
