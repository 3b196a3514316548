# SPDX-License-Identifier: Apache-2.0
"""Shared test fixtures for the Kraken client test suite.

FIXTURES PROVIDED:
- api_key / api_secret: credentials in the exchange's format
- fake_http / fake_async_http: recording HTTP clients, no network
- client: KrakenClient wired to the fakes with a deterministic nonce source
"""

from __future__ import annotations

import pytest

from kraken_api.rest.client import KrakenClient
from kraken_api.rest.nonce import CounterNonce
from tests.fakes.http import FakeAsyncHttpClient, FakeHttpClient

TEST_API_KEY = "test-api-key-0001"
# Example secret from the exchange's API documentation
DOC_API_SECRET = (
    "kQH5HW/8p1uGOVjbgWA7FunAmGO8lsSUXNsu3eow76sz84Q18fWxnyRzBHCd3pd5nE9qa99HAZtuZuj6F1huXg=="
)


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def api_secret() -> str:
    return DOC_API_SECRET


@pytest.fixture
def fake_http() -> FakeHttpClient:
    return FakeHttpClient()


@pytest.fixture
def fake_async_http() -> FakeAsyncHttpClient:
    return FakeAsyncHttpClient()


@pytest.fixture
def client(api_key, api_secret, fake_http, fake_async_http) -> KrakenClient:
    """Client whose nonces are 1001, 1002, ... and whose HTTP never leaves the process."""
    return KrakenClient(
        api_key,
        api_secret,
        nonce_source=CounterNonce(start=1000),
        http_client=fake_http,
        async_http_client=fake_async_http,
    )


@pytest.fixture(autouse=True)
def _clear_kraken_env(monkeypatch):
    """Keep developer credentials in the environment out of the tests."""
    for name in (
        "KRAKEN_API_KEY",
        "KRAKEN_API_SECRET",
        "KRAKEN_OTP",
        "KRAKEN_BASE_URL",
        "KRAKEN_API_VERSION",
        "KRAKEN_TIMEOUT_MS",
    ):
        monkeypatch.delenv(name, raising=False)
