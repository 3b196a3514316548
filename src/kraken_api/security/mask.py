"""Masking helpers that keep API keys and signatures out of logs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

# Headers whose values are credentials or derived from them
SENSITIVE_HEADERS = frozenset({"api-key", "api-sign"})


def mask(value: Optional[str], show: int = 4) -> str:
    """Mask a secret string, showing only the last `show` characters.

    Examples:
        >>> mask("ABCD1234EFGH")
        '********EFGH'
        >>> mask("short")
        '***'
    """
    if not value or len(value) <= show + 2:
        return "***"
    if show == 0:
        return "*" * len(value)
    return "*" * (len(value) - show) + value[-show:]


def safe_for_log(msg: str, *secrets: Optional[str]) -> str:
    """Replace every occurrence of each secret in ``msg`` with its masked form."""
    for secret in secrets:
        if secret:
            msg = msg.replace(secret, mask(secret))
    return msg


def mask_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy of ``headers`` with credential headers masked."""
    return {
        name: mask(value) if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def mask_body(body: str, *fields: str) -> str:
    """Mask the values of ``fields`` inside a url-encoded body."""
    if not fields:
        return body
    parts = []
    for pair in body.split("&"):
        name, sep, value = pair.partition("=")
        if sep and name in fields:
            value = mask(value)
        parts.append(f"{name}{sep}{value}")
    return "&".join(parts)
