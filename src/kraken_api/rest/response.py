# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Sequence

from kraken_api.exceptions import ExchangeError, TransportError, UnknownExchangeError

# Leading character of coded errors, e.g. "EGeneral:Invalid arguments"
ERROR_PREFIX = "E"


def first_error_code(errors: Sequence[Any]) -> Optional[str]:
    """Return the first ``E``-prefixed entry without its prefix, or None."""
    for entry in errors:
        if isinstance(entry, str) and entry.startswith(ERROR_PREFIX):
            return entry[len(ERROR_PREFIX):]
    return None


def classify_response(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Return the parsed response on success or raise the reported error.

    On success the whole object comes back, so callers read ``["result"]``
    and any sibling members the exchange adds.

    Only the first coded error is surfaced, even when the exchange sends
    several.

    Raises:
        TransportError: ``payload`` is not a JSON object or ``error`` is not a list.
        ExchangeError: An ``E``-prefixed error is present.
        UnknownExchangeError: Errors are present but none is coded.
    """
    if not isinstance(payload, Mapping):
        raise TransportError(f"Expected a JSON object, got {type(payload).__name__}")

    errors = payload.get("error", [])
    if isinstance(errors, str):
        errors = [errors] if errors else []
    if not isinstance(errors, (list, tuple)):
        raise TransportError(f"Malformed error field: {errors!r}")

    if not errors:
        return dict(payload)

    code = first_error_code(errors)
    if code is not None:
        raise ExchangeError(code)
    raise UnknownExchangeError(errors)


__all__ = ["classify_response", "first_error_code", "ERROR_PREFIX"]
