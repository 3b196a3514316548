# SPDX-License-Identifier: Apache-2.0
"""Tests for private request signing."""

from __future__ import annotations

import base64
from collections import OrderedDict

import pytest

from kraken_api.exceptions import InvalidCredentialError
from kraken_api.rest.signer import SignatureScheme, decode_secret, encode_params, sign

DOC_SECRET = (
    "kQH5HW/8p1uGOVjbgWA7FunAmGO8lsSUXNsu3eow76sz84Q18fWxnyRzBHCd3pd5nE9qa99HAZtuZuj6F1huXg=="
)

MOCK_RAW_SIGNATURE = (
    "VP8viIhM4IDc0gOPRN4oyDqyBr5/f/rSWMMt/NGjwlq9NcmcSnZESpQ1aT4lETVzmyfzUbR6cIi8+2V1wTWtlQ=="
)
MOCK_LEGACY_SIGNATURE = (
    "iNaaUtEH8JPRb4YvNaK4RhUo4cpIafeSAtrxlfLq9ClA+pqR8ZoB8xG50qCo7qLDmKniVhu0a9tL3Cswz9j1gw=="
)


class TestSign:
    """Test the sign function."""

    def test_sign_matches_exchange_documentation_example(self):
        """Signature for the documented AddOrder request."""
        params = {
            "nonce": "1616492376594",
            "ordertype": "limit",
            "pair": "XBTUSD",
            "price": 37500,
            "type": "buy",
            "volume": 1.25,
        }
        result = sign("/0/private/AddOrder", params, DOC_SECRET, 1616492376594)
        assert result == (
            "4/dpxb3iT4tp/ZCVEwSnEsLxx0bqyhLpdfOpc6fn7OR8+UClSV5n9E6aSS8MPtnRfp32bAb0nmbRn6H8ndwLUQ=="
        )

    def test_sign_with_mock_inputs_uses_raw_digest(self):
        result = sign("/mock/path", {"mock": "foo"}, "mockSecret", "mockNonce")
        assert result == MOCK_RAW_SIGNATURE

    def test_legacy_base64_digest_variant_differs(self):
        legacy = sign(
            "/mock/path",
            {"mock": "foo"},
            "mockSecret",
            "mockNonce",
            scheme=SignatureScheme.BASE64_DIGEST,
        )
        assert legacy == MOCK_LEGACY_SIGNATURE
        assert legacy != MOCK_RAW_SIGNATURE

    def test_sign_is_deterministic(self):
        params = {"nonce": 42, "asset": "XXBT"}
        first = sign("/0/private/Balance", params, DOC_SECRET, 42)
        assert all(sign("/0/private/Balance", params, DOC_SECRET, 42) == first for _ in range(5))

    def test_signature_is_base64_of_sha512_mac(self):
        result = sign("/0/private/Balance", {"nonce": 1}, DOC_SECRET, 1)
        assert len(base64.b64decode(result)) == 64

    def test_signature_depends_on_each_input(self):
        base = sign("/0/private/Balance", {"nonce": 1}, DOC_SECRET, 1)
        assert sign("/0/private/Ledgers", {"nonce": 1}, DOC_SECRET, 1) != base
        assert sign("/0/private/Balance", {"nonce": 2}, DOC_SECRET, 2) != base
        assert sign("/0/private/Balance", {"nonce": 1}, "c2VjcmV0", 1) != base

    def test_invalid_secret_raises_invalid_credential(self):
        with pytest.raises(InvalidCredentialError):
            sign("/0/private/Balance", {"nonce": 1}, "not base64!", 1)


class TestEncodeParams:
    """Test the form encoding used for both signing and the request body."""

    def test_preserves_insertion_order(self):
        params = OrderedDict([("pair", "XBTUSD"), ("nonce", 5), ("type", "buy")])
        assert encode_params(params) == "pair=XBTUSD&nonce=5&type=buy"

    def test_escapes_reserved_characters(self):
        assert encode_params({"userref": "a b&c"}) == "userref=a+b%26c"

    def test_empty_params(self):
        assert encode_params({}) == ""


class TestDecodeSecret:
    """Test Base64 secret decoding."""

    def test_decodes_padded_secret(self):
        assert decode_secret("c2VjcmV0") == b"secret"

    def test_unpadded_secret_decodes_like_padded(self):
        assert decode_secret("mockSecret") == decode_secret("mockSecret==")
        assert decode_secret("mockSecret").hex() == "9a872449e72b7a"

    def test_empty_secret_rejected(self):
        with pytest.raises(InvalidCredentialError):
            decode_secret("")

    def test_url_safe_alphabet_decodes_like_standard(self):
        assert decode_secret("ab-_") == decode_secret("ab+/")
        assert decode_secret("ab-_") == base64.b64decode("ab+/")

    def test_url_safe_secret_signs_like_standard(self):
        standard = DOC_SECRET
        url_safe = standard.replace("+", "-").replace("/", "_")
        assert url_safe != standard
        assert sign("/0/private/Balance", {"nonce": 1}, url_safe, 1) == sign(
            "/0/private/Balance", {"nonce": 1}, standard, 1
        )

    def test_non_alphabet_characters_rejected(self):
        with pytest.raises(InvalidCredentialError):
            decode_secret("abc$def")

    def test_impossible_length_rejected(self):
        # Five characters can never be valid Base64, padded or not
        with pytest.raises(InvalidCredentialError):
            decode_secret("abcde")
