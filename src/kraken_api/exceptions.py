# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for the Kraken REST client."""

from __future__ import annotations

from typing import Optional, Sequence


class KrakenError(Exception):
    """Base exception for every failure raised by this package."""

    pass


class ConfigurationError(KrakenError, ValueError):
    """Client configuration is missing or invalid."""

    pass


class ConfigVersionError(ConfigurationError):
    """Error when configuration version is incompatible."""

    pass


class InvalidCredentialError(KrakenError):
    """API secret is not valid Base64."""

    pass


class UnknownMethodError(KrakenError):
    """Operation name is not part of the API catalog."""

    def __init__(self, method: str, message: Optional[str] = None) -> None:
        self.method = method
        super().__init__(message or f"{method} is not a valid API method.")


class NetworkError(KrakenError):
    """Connection failure or timeout while talking to the exchange."""

    pass


class TransportError(KrakenError):
    """Response body could not be understood as a JSON object."""

    def __init__(self, message: str, body: Optional[str] = None) -> None:
        self.body = body
        super().__init__(message)


class ExchangeError(KrakenError):
    """Structured error reported by the exchange.

    ``code`` is the error string with its leading ``E`` severity marker
    removed, e.g. ``General:Invalid arguments``.
    """

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Kraken API returned error: {code}")


class UnknownExchangeError(KrakenError):
    """Exchange reported errors, none of which carry an error code."""

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors = list(errors)
        super().__init__("Kraken API returned an unknown error")


__all__ = [
    "KrakenError",
    "ConfigurationError",
    "ConfigVersionError",
    "InvalidCredentialError",
    "UnknownMethodError",
    "NetworkError",
    "TransportError",
    "ExchangeError",
    "UnknownExchangeError",
]
