# SPDX-License-Identifier: Apache-2.0
"""Fake implementations used across the test suite."""

from __future__ import annotations

from .http import FakeAsyncHttpClient, FakeHttpClient, FakeResponse, RequestCapture

__all__ = ["FakeHttpClient", "FakeAsyncHttpClient", "FakeResponse", "RequestCapture"]
