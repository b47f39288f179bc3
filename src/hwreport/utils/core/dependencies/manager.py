# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Dependency manager.

Ensures every external tool the report needs is present, attempting a single
installation through the package manager for each missing one. Failures are
reported and never fatal.
"""
import logging
import sys
from typing import Dict, List, Optional, TextIO

from hwreport.utils.core.process import CommandRunner, get_runner

from .loader import DependencyConfigLoader
from .schema import DependencyCheckResult, DependencyConfig, DependencyStatus, ToolDependency

logger = logging.getLogger(__name__)

MISSING_MESSAGE = "'{command}' command not found. Attempting to install..."
INSTALLED_MESSAGE = "'{command}' successfully installed."
FAILED_MESSAGE = "Failed to install '{command}'. Some features may not be available."
SKIPPED_MESSAGE = "'{command}' command not found. Some features may not be available."


class DependencyManager:
    """
    Checks for the report's external tools and installs missing ones.

    The package index is refreshed at most once per manager instance.
    """

    def __init__(
        self,
        config: Optional[DependencyConfig] = None,
        runner: Optional[CommandRunner] = None,
        out: Optional[TextIO] = None,
    ):
        self.config = config or DependencyConfigLoader().load()
        self.runner = runner or get_runner()
        self.out = out or sys.stdout
        self._index_refreshed: Optional[bool] = None

    def check_dependency(self, dependency: ToolDependency) -> bool:
        """Check whether a dependency's command is on PATH."""
        return self.runner.is_available(dependency.command)

    def ensure_dependency(self, dependency: ToolDependency, install: bool = True) -> DependencyCheckResult:
        """
        Make sure a single dependency is present.

        Args:
            dependency: Tool to check
            install: Whether to attempt installation when missing

        Returns:
            DependencyCheckResult describing the outcome
        """
        if self.check_dependency(dependency):
            logger.debug(f"'{dependency.command}' found")
            return DependencyCheckResult(dependency.command, dependency.package, DependencyStatus.PRESENT)

        if not install:
            message = SKIPPED_MESSAGE.format(command=dependency.command)
            self._print(message)
            return DependencyCheckResult(dependency.command, dependency.package, DependencyStatus.SKIPPED, message)

        self._print(MISSING_MESSAGE.format(command=dependency.command))
        self._install_package(dependency.package)

        if self.check_dependency(dependency):
            message = INSTALLED_MESSAGE.format(command=dependency.command)
            status = DependencyStatus.INSTALLED
        else:
            message = FAILED_MESSAGE.format(command=dependency.command)
            status = DependencyStatus.FAILED
            logger.info(f"Package '{dependency.package}' did not provide '{dependency.command}'")

        self._print(message)
        return DependencyCheckResult(dependency.command, dependency.package, status, message)

    def ensure_all(self, install: bool = True) -> Dict[str, DependencyCheckResult]:
        """
        Ensure every configured dependency in catalog order.

        Returns:
            Dictionary mapping command name to DependencyCheckResult
        """
        results = {}
        for dependency in self.config.dependencies:
            results[dependency.command] = self.ensure_dependency(dependency, install=install)
        return results

    def get_missing_dependencies(self, results: Dict[str, DependencyCheckResult]) -> List[str]:
        """Get the commands that are still unavailable after ensuring."""
        return [name for name, result in results.items() if not result.available]

    def _install_package(self, package: str) -> bool:
        """Run the package manager for one package; returns whether it exited cleanly."""
        manager = self.config.package_manager

        if not self.runner.is_available(manager.executable):
            logger.warning(f"Package manager '{manager.executable}' not available, cannot install {package}")
            return False

        if not self._refresh_index():
            return False

        logger.info(f"Installing package {package}")
        result = self.runner.run(
            manager.install_command + [package],
            env=manager.environment,
            timeout=manager.timeout,
        )
        if result.failed:
            logger.warning(f"Installing {package} failed: {result.stderr.strip()}")
        return result.success

    def _refresh_index(self) -> bool:
        if self._index_refreshed is None:
            manager = self.config.package_manager
            if not manager.update_command:
                self._index_refreshed = True
            else:
                logger.info("Refreshing package index")
                result = self.runner.run(manager.update_command, env=manager.environment, timeout=manager.timeout)
                self._index_refreshed = result.success
                if result.failed:
                    logger.warning(f"Package index refresh failed: {result.stderr.strip()}")
        return self._index_refreshed

    def _print(self, message: str) -> None:
        print(message, file=self.out)
