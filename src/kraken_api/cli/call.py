# SPDX-License-Identifier: Apache-2.0
"""``call`` command: perform one API request and print its result."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from kraken_api.exceptions import KrakenError
from kraken_api.rest.client import KrakenClient

from .utils import _configure_logging, _parse_params


def _load_client_config(config: Optional[Path], otp: Optional[str], timeout_ms: Optional[int]):
    # Lazy imports keep --help fast
    if config is not None:
        from kraken_api.config import load_config

        client_config = load_config(config)
        overrides = {k: v for k, v in {"otp": otp, "timeout_ms": timeout_ms}.items() if v is not None}
        return client_config.model_copy(update=overrides) if overrides else client_config

    from kraken_api.settings import load_settings

    return load_settings().to_client_config(otp=otp, timeout_ms=timeout_ms)


def call(
    method: str = typer.Argument(..., help="Operation name, e.g. Ticker or Balance"),
    params: Optional[List[str]] = typer.Argument(None, help="Request params as KEY=VALUE"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML client configuration (defaults to KRAKEN_* env vars)"
    ),
    otp: Optional[str] = typer.Option(None, "--otp", help="Two-factor password"),
    timeout_ms: Optional[int] = typer.Option(None, "--timeout-ms", help="Request timeout"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Call a public or private operation and print the JSON result.

    Examples:
        kraken-api call Time
        kraken-api call Ticker pair=XXBTZUSD
        kraken-api call Balance --config kraken.yaml
    """
    _configure_logging(verbose)
    body = _parse_params(params)

    try:
        client = KrakenClient.from_config(_load_client_config(config, otp, timeout_ms))
        response = client.api(method, body)
    except FileNotFoundError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1)
    except KrakenError as e:
        typer.echo(f"❌ {type(e).__name__}: {e}", err=True)
        raise typer.Exit(1)

    Console().print_json(json.dumps(response.get("result")))
