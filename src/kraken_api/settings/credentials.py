# SPDX-License-Identifier: Apache-2.0
"""Environment settings for the Kraken client.

Credentials are read from ``KRAKEN_*`` environment variables so they never
have to appear in code or config files. Missing required variables raise a
pydantic ``ValidationError`` when the settings object is created.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from kraken_api.exceptions import ConfigurationError
from kraken_api.rest.models import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    ClientConfig,
)


class KrakenSettings(BaseSettings):
    """Kraken REST API settings.

    Environment Variables:
        KRAKEN_API_KEY: API key from the Kraken account settings
        KRAKEN_API_SECRET: Base64 private key shown once at key creation
        KRAKEN_OTP: Two-factor password for the key (optional)
        KRAKEN_BASE_URL: API host (optional)
        KRAKEN_API_VERSION: Path version segment (optional)
        KRAKEN_TIMEOUT_MS: Request timeout in milliseconds (optional)
    """

    api_key: str = Field(..., alias="KRAKEN_API_KEY", description="Kraken API key")
    api_secret: str = Field(..., alias="KRAKEN_API_SECRET", description="Kraken API secret")
    otp: Optional[str] = Field(None, alias="KRAKEN_OTP", description="Two-factor password")
    base_url: str = Field(
        default=DEFAULT_BASE_URL, alias="KRAKEN_BASE_URL", description="Kraken API base URL"
    )
    version: int = Field(
        default=DEFAULT_API_VERSION, alias="KRAKEN_API_VERSION", description="API version"
    )
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS, alias="KRAKEN_TIMEOUT_MS", description="Timeout (ms)"
    )

    class Config:
        env_prefix = ""  # Use exact env var names
        case_sensitive = True

    def to_client_config(self, **overrides) -> ClientConfig:
        """Build the immutable client configuration, applying ``overrides``."""
        values = {
            "api_key": self.api_key,
            "api_secret": self.api_secret,
            "otp": self.otp,
            "base_url": self.base_url,
            "version": self.version,
            "timeout_ms": self.timeout_ms,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return ClientConfig(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid Kraken settings: {e}") from e


def load_settings() -> KrakenSettings:
    """Read settings from the environment.

    Raises:
        ConfigurationError: If ``KRAKEN_API_KEY`` or ``KRAKEN_API_SECRET`` is missing.
    """
    try:
        return KrakenSettings()
    except ValidationError as e:
        raise ConfigurationError(
            "KRAKEN_API_KEY and KRAKEN_API_SECRET must be set in the environment"
        ) from e


__all__ = ["KrakenSettings", "load_settings"]
