"""Tests for security masking utilities."""

from kraken_api.security.mask import mask, mask_body, mask_headers, safe_for_log


class TestMask:
    """Test the mask function."""

    def test_mask_normal_key(self):
        """Test masking a normal API key."""
        result = mask("ABCD1234EFGH")
        assert result == "********EFGH"

    def test_mask_custom_show_amount(self):
        result = mask("ABCD1234EFGH", show=6)
        assert result == "******34EFGH"

    def test_mask_empty_and_none(self):
        assert mask("") == "***"
        assert mask(None) == "***"

    def test_mask_short_string(self):
        """Strings too short to mask safely are hidden entirely."""
        assert mask("short") == "***"
        assert mask("123456") == "***"

    def test_mask_exactly_minimum_length(self):
        # show=4, so minimum length is 4+2+1=7
        assert mask("1234567") == "***4567"

    def test_mask_base64_secret(self):
        secret = "kQH5HW/8p1uGOVjbgWA7FunAmGO8lsSUXNsu3eow76sz84Q18fWxnyRzBHCd3pd5nE9qa99HAZtuZuj6F1huXg=="
        result = mask(secret)
        assert result.endswith("Xg==")
        assert len(result) == len(secret)
        assert "kQH5" not in result

    def test_mask_zero_show(self):
        assert mask("ABCD1234EFGH", show=0) == "************"


class TestSafeForLog:
    """Test the safe_for_log function."""

    def test_single_secret(self):
        result = safe_for_log("API key is ABCD1234EFGH", "ABCD1234EFGH")
        assert result == "API key is ********EFGH"

    def test_multiple_secrets(self):
        result = safe_for_log(
            "Error with key: ABCD1234EFGH and secret: WXYZ5678IJKL", "ABCD1234EFGH", "WXYZ5678IJKL"
        )
        assert result == "Error with key: ********EFGH and secret: ********IJKL"

    def test_empty_or_none_secret_is_ignored(self):
        assert safe_for_log("Log message with key", "", None) == "Log message with key"

    def test_multiple_occurrences(self):
        result = safe_for_log("First: ABCD1234EFGH, Second: ABCD1234EFGH", "ABCD1234EFGH")
        assert result == "First: ********EFGH, Second: ********EFGH"


class TestMaskHeaders:
    def test_credential_headers_masked(self):
        headers = {
            "User-Agent": "Kraken Python API Client",
            "API-Key": "ABCD1234EFGH",
            "API-Sign": "c2lnbmF0dXJlLXZhbHVl",
        }

        result = mask_headers(headers)

        assert result["User-Agent"] == "Kraken Python API Client"
        assert result["API-Key"] == "********EFGH"
        assert "c2lnbmF0dXJl" not in result["API-Sign"]

    def test_header_names_are_case_insensitive(self):
        assert mask_headers({"api-key": "ABCD1234EFGH"}) == {"api-key": "********EFGH"}

    def test_original_not_modified(self):
        headers = {"API-Key": "ABCD1234EFGH"}
        mask_headers(headers)
        assert headers == {"API-Key": "ABCD1234EFGH"}


class TestMaskBody:
    def test_named_fields_masked(self):
        assert mask_body("nonce=1&otp=12345678", "otp") == "nonce=1&otp=****5678"

    def test_short_values_hidden(self):
        assert mask_body("nonce=1&otp=123456", "otp") == "nonce=1&otp=***"

    def test_no_fields_returns_body(self):
        assert mask_body("nonce=1&otp=123456") == "nonce=1&otp=123456"

    def test_pairs_without_value_kept(self):
        assert mask_body("flag&otp=12345678", "otp") == "flag&otp=****5678"
