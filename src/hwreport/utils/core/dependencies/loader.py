# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Dependency configuration loader.

Reads the packaged dependencies.yml catalog into structured objects.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from hwreport.utils.config import DEPENDENCIES_CONFIG, ConfigError, get_config_path, load_yaml_config

from .schema import DependencyConfig, PackageManager, ToolDependency

logger = logging.getLogger(__name__)


class DependencyConfigLoader:
    """Loads the dependency catalog."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else get_config_path(DEPENDENCIES_CONFIG)

    def load(self) -> DependencyConfig:
        """
        Load and parse the dependency configuration.

        Returns:
            Parsed DependencyConfig

        Raises:
            ConfigError: If the file is missing or malformed
        """
        raw_config = load_yaml_config(str(self.config_path))
        config = self._parse_config(raw_config)
        logger.debug(f"Loaded {len(config.dependencies)} dependencies from {self.config_path}")
        return config

    def _parse_config(self, raw_config: Dict[str, Any]) -> DependencyConfig:
        """Parse raw YAML config into structured objects."""
        config = DependencyConfig()
        config.version = str(raw_config.get("version", "1.0"))

        manager_data = raw_config.get("package_manager")
        if manager_data:
            config.package_manager = self._parse_package_manager(manager_data)

        seen = set()
        for dep_data in raw_config.get("dependencies", []):
            dependency = self._parse_dependency(dep_data)
            if dependency.command in seen:
                raise ConfigError(f"Duplicate dependency '{dependency.command}' in {self.config_path}")
            seen.add(dependency.command)
            config.dependencies.append(dependency)

        return config

    def _parse_package_manager(self, data: Dict[str, Any]) -> PackageManager:
        defaults = PackageManager()
        manager = PackageManager(
            name=data.get("name", defaults.name),
            update_command=[str(arg) for arg in data.get("update", defaults.update_command)],
            install_command=[str(arg) for arg in data.get("install", defaults.install_command)],
            environment={str(k): str(v) for k, v in (data.get("environment") or {}).items()},
            timeout=float(data.get("timeout", defaults.timeout)),
        )
        if not manager.install_command:
            raise ConfigError(f"Package manager install command is empty in {self.config_path}")
        return manager

    def _parse_dependency(self, data: Dict[str, Any]) -> ToolDependency:
        """Parse a single dependency from configuration data."""
        if not isinstance(data, dict) or "command" not in data:
            raise ConfigError(f"Dependency entry without a command in {self.config_path}: {data!r}")

        command = str(data["command"])
        return ToolDependency(
            command=command,
            package=str(data.get("package", command)),
            description=data.get("description", ""),
        )
