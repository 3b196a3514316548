# SPDX-License-Identifier: Apache-2.0
"""File-based configuration for the Kraken client."""

from kraken_api.exceptions import ConfigVersionError

from .loader import CURRENT_CONFIG_VERSION, MIN_SUPPORTED_VERSION, load_config

__all__ = [
    "CURRENT_CONFIG_VERSION",
    "MIN_SUPPORTED_VERSION",
    "load_config",
    "ConfigVersionError",
]
