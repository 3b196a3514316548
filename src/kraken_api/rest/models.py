# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .methods import ApiMethod

DEFAULT_BASE_URL = "https://api.kraken.com"
DEFAULT_API_VERSION = 0
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_USER_AGENT = "Kraken Python API Client"


class ClientConfig(BaseModel):
    """Immutable configuration shared by every request of a client."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: str = Field(..., description="Kraken API key")
    api_secret: str = Field(..., description="Base64-encoded Kraken API secret")
    otp: Optional[str] = Field(None, description="Two-factor password sent with private calls")
    base_url: str = DEFAULT_BASE_URL
    version: int = Field(DEFAULT_API_VERSION, ge=0)
    timeout_ms: int = Field(DEFAULT_TIMEOUT_MS, gt=0, description="Per-request timeout")
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("api_key", "api_secret")
    @classmethod
    def validate_credential(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("null key or secret")
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {v!r}")
        return v.rstrip("/")

    @property
    def timeout(self) -> float:
        """Timeout in seconds, as httpx expects it."""
        return self.timeout_ms / 1000.0


@dataclass(frozen=True)
class PreparedRequest:
    """Fully built POST request; ``body`` is exactly what was signed."""

    method: ApiMethod
    url: str
    path: str
    body: str
    timeout: float
    headers: dict[str, str] = field(default_factory=dict)


__all__ = [
    "ClientConfig",
    "PreparedRequest",
    "DEFAULT_BASE_URL",
    "DEFAULT_API_VERSION",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_USER_AGENT",
]
