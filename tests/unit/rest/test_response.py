# SPDX-License-Identifier: Apache-2.0
"""Tests for response classification."""

from __future__ import annotations

import pytest

from kraken_api.exceptions import ExchangeError, TransportError, UnknownExchangeError
from kraken_api.rest.response import classify_response, first_error_code


class TestClassifyResponse:
    def test_empty_error_list_returns_whole_response(self):
        payload = {"error": [], "result": {"unixtime": 1688669448}}
        assert classify_response(payload) == {"error": [], "result": {"unixtime": 1688669448}}

    def test_sibling_members_are_kept(self):
        payload = {"error": [], "result": {"count": 0}, "extra": "kept"}
        assert classify_response(payload)["extra"] == "kept"

    def test_success_without_result(self):
        assert classify_response({"error": []}) == {"error": []}

    def test_missing_error_field_is_success(self):
        assert classify_response({"result": [1, 2]}) == {"result": [1, 2]}

    def test_empty_string_error_is_success(self):
        assert classify_response({"error": "", "result": 1})["result"] == 1

    def test_bare_string_error_is_wrapped(self):
        with pytest.raises(ExchangeError):
            classify_response({"error": "EGeneral:Invalid"})

    def test_coded_error_strips_prefix(self):
        with pytest.raises(ExchangeError) as exc_info:
            classify_response({"error": ["EGeneral:Invalid"]})
        assert exc_info.value.code == "General:Invalid"
        assert str(exc_info.value) == "Kraken API returned error: General:Invalid"

    def test_uncoded_error_is_unknown(self):
        with pytest.raises(UnknownExchangeError) as exc_info:
            classify_response({"error": ["Unrecognized"]})
        assert exc_info.value.errors == ["Unrecognized"]

    def test_first_coded_error_wins(self):
        with pytest.raises(ExchangeError) as exc_info:
            classify_response({"error": ["Foo", "EBar"]})
        assert exc_info.value.code == "Bar"

    def test_only_first_of_several_coded_errors_is_reported(self):
        with pytest.raises(ExchangeError) as exc_info:
            classify_response({"error": ["EAPI:Invalid nonce", "EGeneral:Internal error"]})
        assert exc_info.value.code == "API:Invalid nonce"

    def test_error_with_result_is_still_an_error(self):
        with pytest.raises(ExchangeError):
            classify_response({"error": ["EOrder:Insufficient funds"], "result": {}})

    def test_non_object_payload_is_transport_error(self):
        with pytest.raises(TransportError):
            classify_response(["EGeneral:Invalid"])

    @pytest.mark.parametrize("error", [42, 0, None, False, {}])
    def test_malformed_error_field_is_transport_error(self, error):
        with pytest.raises(TransportError):
            classify_response({"error": error, "result": 5})


def test_first_error_code_skips_non_strings():
    assert first_error_code([None, 7, "EService:Unavailable"]) == "Service:Unavailable"
    assert first_error_code(["Warning"]) is None
