# SPDX-License-Identifier: Apache-2.0
"""REST client: catalog, signing, request building, transport and facade."""

from __future__ import annotations

from .auth import AuthStrategy, KrakenSignatureAuth, NoAuth
from .client import KrakenClient
from .methods import PRIVATE_METHODS, PUBLIC_METHODS, Access, ApiMethod
from .models import ClientConfig, PreparedRequest
from .nonce import ClockNonce, CounterNonce, NonceSource, default_nonce_source
from .request_builder import RequestBuilder
from .response import classify_response
from .signer import SignatureScheme, decode_secret, encode_params, sign
from .transport import AsyncTransport, Transport

__all__ = [
    # Facade
    "KrakenClient",
    # Catalog
    "Access",
    "ApiMethod",
    "PUBLIC_METHODS",
    "PRIVATE_METHODS",
    # Models
    "ClientConfig",
    "PreparedRequest",
    # Signing and auth
    "sign",
    "encode_params",
    "decode_secret",
    "SignatureScheme",
    "AuthStrategy",
    "NoAuth",
    "KrakenSignatureAuth",
    # Nonces
    "NonceSource",
    "ClockNonce",
    "CounterNonce",
    "default_nonce_source",
    # Pipeline
    "RequestBuilder",
    "Transport",
    "AsyncTransport",
    "classify_response",
]
