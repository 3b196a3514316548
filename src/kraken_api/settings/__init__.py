# SPDX-License-Identifier: Apache-2.0
"""Environment-backed settings."""

from .credentials import KrakenSettings, load_settings

__all__ = ["KrakenSettings", "load_settings"]
