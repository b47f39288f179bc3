# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Dependency management schema.

Describes the external tools the report relies on, the package that
provides each of them and the package manager used to install them.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class DependencyStatus(Enum):
    """Outcome of ensuring a single tool is present."""
    PRESENT = "present"
    INSTALLED = "installed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class PackageManager:
    """Commands used to refresh the package index and install packages."""
    name: str = "apt-get"
    update_command: List[str] = field(default_factory=lambda: ["apt-get", "update"])
    install_command: List[str] = field(default_factory=lambda: ["apt-get", "install", "-y"])
    environment: Dict[str, str] = field(default_factory=dict)
    timeout: float = 600.0

    @property
    def executable(self) -> str:
        return self.install_command[0]


@dataclass
class ToolDependency:
    """An external command and the package providing it."""
    command: str
    package: str
    description: str = ""


@dataclass
class DependencyConfig:
    """Complete dependency configuration."""
    version: str = "1.0"
    package_manager: PackageManager = field(default_factory=PackageManager)
    dependencies: List[ToolDependency] = field(default_factory=list)


@dataclass
class DependencyCheckResult:
    """Result of ensuring a dependency."""
    name: str
    package: str
    status: DependencyStatus
    message: str = ""

    @property
    def available(self) -> bool:
        return self.status in (DependencyStatus.PRESENT, DependencyStatus.INSTALLED)
