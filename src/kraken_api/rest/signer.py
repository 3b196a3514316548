# SPDX-License-Identifier: Apache-2.0
"""Request signing for private endpoints.

API-Sign = Base64(HMAC-SHA512(Base64Decode(secret), path + SHA256(nonce + postdata)))

``postdata`` is the url-encoded request body, which must be byte-for-byte
what is later sent on the wire.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, Union
from urllib.parse import urlencode

from kraken_api.exceptions import InvalidCredentialError

Nonce = Union[int, str]

_BASE64_RE = re.compile(r"[A-Za-z0-9+/]*={0,2}")
_URLSAFE_TO_STD = str.maketrans("-_", "+/")


class SignatureScheme(str, Enum):
    """How the inner SHA-256 digest is joined to the request path."""

    # Raw digest bytes; what the exchange verifies today.
    RAW_DIGEST = "raw"
    # Base64 text of the digest; older client revisions sent this.
    BASE64_DIGEST = "base64"


def encode_params(params: Mapping[str, Any]) -> str:
    """Serialize params as application/x-www-form-urlencoded, keeping key order."""
    return urlencode(list(params.items()))


def decode_secret(secret: str) -> bytes:
    """Decode the Base64 API secret into the HMAC key.

    Raises:
        InvalidCredentialError: If ``secret`` is empty or not Base64.
    """
    if not isinstance(secret, str) or not secret.strip():
        raise InvalidCredentialError("API secret is empty")

    # URL-safe alphabet decodes to the same bytes as the standard one.
    cleaned = secret.strip().translate(_URLSAFE_TO_STD)
    # Pad to a multiple of four; unpadded secrets decode as if padded.
    cleaned += "=" * (-len(cleaned) % 4)
    if not _BASE64_RE.fullmatch(cleaned):
        raise InvalidCredentialError("API secret is not valid Base64")
    try:
        return base64.b64decode(cleaned)
    except (binascii.Error, ValueError) as e:
        raise InvalidCredentialError(f"API secret is not valid Base64: {e}") from e


def sign(
    path: str,
    params: Mapping[str, Any],
    secret: str,
    nonce: Nonce,
    scheme: SignatureScheme = SignatureScheme.RAW_DIGEST,
) -> str:
    """Return the Base64 ``API-Sign`` value for a private request.

    Args:
        path: Request path only, e.g. ``/0/private/Balance``.
        params: POST body params; must already contain the same ``nonce``.
        secret: Base64 API secret.
        nonce: Nonce placed in ``params``.
        scheme: Digest concatenation variant, see :class:`SignatureScheme`.

    Raises:
        InvalidCredentialError: If ``secret`` is not valid Base64.
    """
    key = decode_secret(secret)
    message = (str(nonce) + encode_params(params)).encode("utf-8")
    inner = hashlib.sha256(message).digest()

    if scheme is SignatureScheme.BASE64_DIGEST:
        payload = (path + base64.b64encode(inner).decode("ascii")).encode("utf-8")
    else:
        payload = path.encode("utf-8") + inner

    mac = hmac.new(key, payload, hashlib.sha512)
    return base64.b64encode(mac.digest()).decode("ascii")


__all__ = ["SignatureScheme", "encode_params", "decode_secret", "sign"]
