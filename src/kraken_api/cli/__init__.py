# SPDX-License-Identifier: Apache-2.0
"""Kraken REST client CLI."""

from __future__ import annotations

import typer

from .call import call
from .catalog import methods, sign_command

app = typer.Typer(
    add_completion=False,
    help="Command-line access to the Kraken REST API",
)

app.command(name="call")(call)
app.command(name="methods")(methods)
app.command(name="sign")(sign_command)

__all__ = ["app"]
