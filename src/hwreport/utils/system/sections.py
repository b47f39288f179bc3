# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Report section generation.

Runs the external command behind each section, filters its output and
prints it under the section header. Unavailable tools and hardware classes
degrade to a fixed placeholder instead of failing.
"""

import logging
import sys
from typing import Optional, TextIO

from hwreport.utils.core.process import CommandRunner, ProcessResult, get_runner

from .disk_health import DiskHealthChecker
from .filters import apply_filter
from .schema import Section, SectionKind

logger = logging.getLogger(__name__)

NOT_AVAILABLE_TEMPLATE = "{subject} information not available."


def not_available_message(section: Section) -> str:
    return NOT_AVAILABLE_TEMPLATE.format(subject=section.placeholder_subject)


class SectionGenerator:
    """Prints report sections to an output stream."""

    def __init__(self, runner: Optional[CommandRunner] = None, out: Optional[TextIO] = None):
        self.runner = runner or get_runner()
        self.out = out or sys.stdout
        self._header_printed_for: Optional[str] = None

    def generate(self, section: Section) -> bool:
        """
        Print one section.

        Args:
            section: Section to print

        Returns:
            bool: True if the section printed data, False if it degraded to the placeholder
        """
        logger.debug(f"Generating section {section.name}")
        self._header_printed_for = None

        if section.kind == SectionKind.LSHW_CLASS:
            return self._generate_lshw_class(section)
        if section.kind == SectionKind.DISK_HEALTH:
            return self._generate_disk_health(section)
        return self._generate_command(section)

    def print_placeholder(self, section: Section) -> None:
        """
        Print the not-available placeholder in the section's layout.

        The header is not repeated when the section already printed it.
        """
        if section.kind == SectionKind.LSHW_CLASS:
            self._print("")
        elif self._header_printed_for != section.name:
            self._print_header(section)
        self._print(not_available_message(section))

    def _generate_command(self, section: Section) -> bool:
        result = self._run(section)
        if result is None or result.timed_out or (result.failed and not result.stdout.strip()):
            self.print_placeholder(section)
            return False

        self._print_header(section)
        for line in apply_filter(result.stdout, section.filter):
            self._print(line)
        return True

    def _generate_lshw_class(self, section: Section) -> bool:
        result = self._run(section)
        lines = apply_filter(result.stdout, section.filter) if result and result.success else []
        if not lines:
            logger.info(f"lshw reports no {section.name} devices")
            self.print_placeholder(section)
            return False

        self._print_header(section)
        for line in lines:
            self._print(line)
        return True

    def _generate_disk_health(self, section: Section) -> bool:
        checker = DiskHealthChecker(runner=self.runner, out=self.out, list_command=section.command)
        disks = checker.list_disks()
        if disks is None:
            self.print_placeholder(section)
            return False

        self._print_header(section)
        checker.check_disks(disks)
        return True

    def _run(self, section: Section) -> Optional[ProcessResult]:
        if not self.runner.is_available(section.tool):
            logger.info(f"'{section.tool}' not available, skipping {section.name}")
            return None

        result = self.runner.run(section.command)
        if result.failed:
            logger.debug(f"{' '.join(section.command)} exited with {result.returncode}: {result.stderr.strip()}")
        return result

    def _print_header(self, section: Section) -> None:
        self._print("")
        self._print(f"{section.title}:")
        self._header_printed_for = section.name

    def _print(self, message: str) -> None:
        print(message, file=self.out)
