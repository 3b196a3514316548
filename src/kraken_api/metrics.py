# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from prometheus_client import Counter, Histogram

# Labelled by operation name and access class (public/private)
REQUESTS = Counter("kraken_requests_total", "API requests", ["method", "access"])
ERRORS = Counter("kraken_errors_total", "Errors", ["method", "kind"])
LATENCY = Histogram("kraken_request_latency_seconds", "Latency", ["method"])

__all__ = ["REQUESTS", "ERRORS", "LATENCY"]
