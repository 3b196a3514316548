# SPDX-License-Identifier: Apache-2.0
"""Helpers shared by CLI commands."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import typer


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)-5s [%(name)s] %(message)s",
        force=True,  # Override any existing configuration
    )


def _coerce(value: str) -> Any:
    """Keep integers as int so nonces and counts encode without a decimal point."""
    if value.lstrip("-").isdigit():
        return int(value)
    return value


def _parse_params(items: Optional[List[str]]) -> Dict[str, Any]:
    """Parse ``KEY=VALUE`` arguments into an ordered params dict."""
    params: Dict[str, Any] = {}
    for item in items or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected KEY=VALUE, got {item!r}")
        params[key] = _coerce(value)
    return params
