# SPDX-License-Identifier: Apache-2.0
"""YAML configuration loader with version validation.

Example file::

    config_version: "1"
    api-key: ${KRAKEN_API_KEY}
    api-secret: ${KRAKEN_API_SECRET}
    timeout-ms: 10000
"""

from __future__ import annotations

import os
import warnings
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from kraken_api.exceptions import ConfigurationError, ConfigVersionError
from kraken_api.rest.models import ClientConfig

PathLike = Union[str, Path]

# Configuration versioning constants
CURRENT_CONFIG_VERSION = "1"
MIN_SUPPORTED_VERSION = "1"


def load_config(path: PathLike) -> ClientConfig:
    """Load and validate a client configuration from a YAML file.

    Args:
        path: Path to YAML configuration file

    Returns:
        ClientConfig instance

    Raises:
        ConfigVersionError: If config version is missing or too old
        FileNotFoundError: If the YAML file doesn't exist
        ConfigurationError: If the YAML is invalid or contains invalid configuration
    """
    yaml_path = Path(path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(yaml_path, "r") as f:
        yaml_content = f.read()

    # Expand environment variables
    expanded_content = os.path.expandvars(yaml_content)

    try:
        cfg_dict = yaml.safe_load(expanded_content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}") from e

    if not isinstance(cfg_dict, dict):
        raise ConfigurationError("YAML file must contain a dictionary at the root level")

    normalized = _normalize_yaml_keys(cfg_dict)

    ver = str(normalized.pop("config_version", "") or "")
    if not ver:
        raise ConfigVersionError(
            "config_version missing. Add `config_version: \"1\"` to your YAML."
        )
    try:
        ver_num = int(ver)
    except ValueError:
        raise ConfigVersionError(f"config_version must be an integer, got {ver!r}") from None

    if ver_num < int(MIN_SUPPORTED_VERSION):
        raise ConfigVersionError(
            f"Config version {ver} is too old. "
            f"Minimum supported is {MIN_SUPPORTED_VERSION}."
        )
    if ver_num > int(CURRENT_CONFIG_VERSION):
        warnings.warn(
            f"This client understands config_version {CURRENT_CONFIG_VERSION}, "
            f"but file is {ver}. Attempting best-effort parse.",
            UserWarning,
            stacklevel=2,
        )

    try:
        return ClientConfig(**normalized)
    except ValidationError as e:
        raise ConfigurationError(f"Failed to load configuration from {path}: {e}") from e


def _normalize_yaml_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize YAML keys from kebab-case to snake_case; ``key``/``secret`` are aliases."""
    aliases = {"key": "api_key", "secret": "api_secret", "url": "base_url"}
    normalized = {}
    for key, value in data.items():
        snake = str(key).replace("-", "_")
        normalized[aliases.get(snake, snake)] = value
    return normalized


__all__ = ["load_config", "CURRENT_CONFIG_VERSION", "MIN_SUPPORTED_VERSION"]
