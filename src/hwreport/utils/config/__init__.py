# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Configuration utilities package.

Provides utilities for loading the packaged YAML catalogs and
package metadata.
"""

from .config import (
    DEPENDENCIES_CONFIG,
    SECTIONS_CONFIG,
    ConfigError,
    get_config_path,
    get_configs_dir,
    load_yaml_config,
)
from .config_loader import get_dist_name, get_dist_version

__all__ = [
    "ConfigError",
    "DEPENDENCIES_CONFIG",
    "SECTIONS_CONFIG",
    "get_config_path",
    "get_configs_dir",
    "load_yaml_config",
    "get_dist_name",
    "get_dist_version",
]
