# SPDX-License-Identifier: Apache-2.0
"""Offline commands: list the operation catalog and compute signatures."""

from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from kraken_api.exceptions import InvalidCredentialError
from kraken_api.rest.methods import Access, ApiMethod
from kraken_api.rest.models import DEFAULT_API_VERSION
from kraken_api.rest.signer import SignatureScheme, sign

from .utils import _parse_params


def methods(
    access: Optional[Access] = typer.Option(
        None, "--access", "-a", help="Only show public or private operations"
    ),
):
    """List the REST operations the client can call."""
    table = Table(title="Kraken REST operations")
    table.add_column("Method", style="cyan")
    table.add_column("Access")
    table.add_column("Path")

    for method in ApiMethod:
        if access is not None and method.access is not access:
            continue
        path = f"/{DEFAULT_API_VERSION}/{method.access.value}/{method.wire_name}"
        table.add_row(method.wire_name, method.access.value, path)

    Console().print(table)


def sign_command(
    path: str = typer.Argument(..., help="Request path, e.g. /0/private/Balance"),
    nonce: str = typer.Argument(..., help="Nonce also present in the params"),
    params: Optional[List[str]] = typer.Argument(None, help="Body params as KEY=VALUE"),
    secret: str = typer.Option(
        ..., "--secret", envvar="KRAKEN_API_SECRET", help="Base64 API secret"
    ),
    legacy: bool = typer.Option(
        False, "--legacy", help="Use the Base64 inner-digest variant of older API revisions"
    ),
):
    """Print the API-Sign value for a request without sending it."""
    body = {"nonce": nonce, **_parse_params(params)}
    scheme = SignatureScheme.BASE64_DIGEST if legacy else SignatureScheme.RAW_DIGEST
    try:
        signature = sign(path, body, secret, body["nonce"], scheme)
    except InvalidCredentialError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1)
    typer.echo(signature)
