# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Configuration loader utilities for package metadata.
"""

import importlib.metadata
import logging
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_DIST_NAME = "hwreport"


def get_dist_name() -> Optional[str]:
    """Get the distribution name for the current package."""
    pkg = __name__.split(".", 1)[0]
    mapping = importlib.metadata.packages_distributions()
    return mapping.get(pkg, [DEFAULT_DIST_NAME])[0]


def get_dist_version(dist: Optional[str] = None) -> str:
    """Get the version of a distribution."""
    if not dist:
        dist = get_dist_name()
    try:
        return importlib.metadata.version(dist)
    except importlib.metadata.PackageNotFoundError:
        logger.debug(f"Distribution {dist} is not installed")
        return "unknown"
