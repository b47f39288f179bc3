# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Dependency management package.

Loads the catalog of external tools and ensures each one is present,
installing missing tools through the system package manager.
"""
from .loader import DependencyConfigLoader
from .manager import DependencyManager
from .schema import (
    DependencyCheckResult,
    DependencyConfig,
    DependencyStatus,
    PackageManager,
    ToolDependency,
)

__all__ = [
    'DependencyManager',
    'DependencyConfigLoader',
    'DependencyConfig',
    'DependencyCheckResult',
    'DependencyStatus',
    'PackageManager',
    'ToolDependency',
]
