# SPDX-License-Identifier: Apache-2.0
"""Kraken REST API client."""

from .exceptions import (
    ConfigurationError,
    ExchangeError,
    InvalidCredentialError,
    KrakenError,
    NetworkError,
    TransportError,
    UnknownExchangeError,
    UnknownMethodError,
)
from .rest import Access, ApiMethod, ClientConfig, KrakenClient, SignatureScheme, sign

__version__ = "0.1.0"

__all__ = [
    "KrakenClient",
    "ClientConfig",
    "ApiMethod",
    "Access",
    "SignatureScheme",
    "sign",
    "KrakenError",
    "ConfigurationError",
    "InvalidCredentialError",
    "UnknownMethodError",
    "NetworkError",
    "TransportError",
    "ExchangeError",
    "UnknownExchangeError",
    "__version__",
]
