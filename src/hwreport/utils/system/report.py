# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Hardware report driver.

Prints the opening banner, ensures the external tools are installed, prints
every section in catalog order and finishes with the closing banner. Each
section degrades independently; nothing here changes the exit status.
"""

import logging
import sys
from typing import Dict, List, Optional, TextIO

from hwreport.utils.core.dependencies import DependencyCheckResult, DependencyConfig, DependencyManager
from hwreport.utils.core.process import CommandRunner, get_runner

from .catalog import load_sections
from .schema import Section
from .sections import SectionGenerator

logger = logging.getLogger(__name__)

BANNER_RULE = "=" * 34
OPENING_BANNER = ["Gathering hardware information...", BANNER_RULE]
CLOSING_BANNER = [f" {BANNER_RULE} ", "Hardware information gathered successfully!"]


class HardwareReport:
    """Generates the hardware report on an output stream."""

    def __init__(
        self,
        sections: Optional[List[Section]] = None,
        dependency_config: Optional[DependencyConfig] = None,
        runner: Optional[CommandRunner] = None,
        out: Optional[TextIO] = None,
        install: bool = True,
    ):
        self.runner = runner or get_runner()
        self.out = out or sys.stdout
        self.sections = sections if sections is not None else load_sections()
        self.dependency_manager = DependencyManager(config=dependency_config, runner=self.runner, out=self.out)
        self.install = install
        self.generator = SectionGenerator(runner=self.runner, out=self.out)

    def generate(self) -> Dict[str, bool]:
        """
        Print the full report.

        Returns:
            Dict mapping section name to whether it printed data
        """
        results = {}
        self._print_lines(OPENING_BANNER)
        try:
            try:
                self.ensure_dependencies()
            except Exception as e:
                logger.error(f"Error checking dependencies: {e}")

            for section in self.sections:
                results[section.name] = self._generate_section(section)
        finally:
            self._print_lines(CLOSING_BANNER)

        degraded = [name for name, ok in results.items() if not ok]
        if degraded:
            logger.info(f"Sections without data: {', '.join(degraded)}")
        return results

    def ensure_dependencies(self) -> Dict[str, DependencyCheckResult]:
        results = self.dependency_manager.ensure_all(install=self.install)
        missing = self.dependency_manager.get_missing_dependencies(results)
        if missing:
            logger.info(f"Unavailable tools: {', '.join(missing)}")
        return results

    def _generate_section(self, section: Section) -> bool:
        try:
            return self.generator.generate(section)
        except Exception as e:
            logger.error(f"Error generating section {section.name}: {e}")
            self.generator.print_placeholder(section)
            return False

    def _print_lines(self, lines: List[str]) -> None:
        for line in lines:
            print(line, file=self.out)
