# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Utilities for handling the packaged YAML configuration files.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

SECTIONS_CONFIG = "sections.yml"
DEPENDENCIES_CONFIG = "dependencies.yml"


class ConfigError(Exception):
    """Raised when a configuration file is missing or malformed."""

    pass


def get_configs_dir() -> Path:
    """Get the directory holding the packaged configuration files."""
    return Path(__file__).resolve().parents[2] / "configs"


def get_config_path(filename: str) -> Path:
    """
    Resolve a packaged configuration file by name.

    Args:
        filename: Configuration file name (e.g. ``sections.yml``)

    Returns:
        Path to the configuration file
    """
    return get_configs_dir() / filename


def load_yaml_config(config_path: str) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Dict containing the configuration

    Raises:
        ConfigError: If config file doesn't exist or is invalid YAML
    """
    if not os.path.exists(config_path):
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as file:
            config = yaml.safe_load(file)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Expected a mapping at the top level of {config_path}")

    logger.debug(f"Loaded configuration from {config_path}")
    return config
