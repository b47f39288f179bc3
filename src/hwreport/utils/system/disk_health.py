# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Disk health status via SMART.

Every block device of type ``disk`` is checked for SMART support before its
overall health is requested. Each checked disk produces exactly one outcome:
the smartctl health report or a not-supported notice.
"""

import logging
import os
import stat
import sys
from enum import Enum
from typing import Callable, Dict, List, Optional, TextIO

from hwreport.utils.core.process import CommandRunner, get_runner

logger = logging.getLogger(__name__)

LIST_DISKS_COMMAND = ["lsblk", "-dn", "-o", "NAME,TYPE"]
SMARTCTL = "smartctl"
SMART_AVAILABLE_MARKER = "SMART support is: Available"

CHECKING_MESSAGE = "Checking {device}:"
NOT_SUPPORTED_MESSAGE = "SMART not supported or not available for {device}"
HEALTH_UNREADABLE_MESSAGE = "SMART health status could not be read for {device}"


class DiskHealthOutcome(Enum):
    REPORTED = "reported"
    NOT_SUPPORTED = "not_supported"


def is_block_device(path: str) -> bool:
    """Check whether a path is a block device node."""
    try:
        return stat.S_ISBLK(os.stat(path).st_mode)
    except OSError:
        return False


def parse_disk_names(lsblk_output: str) -> List[str]:
    """
    Pick the device names of type ``disk`` from ``lsblk -dn -o NAME,TYPE`` output.
    """
    disks = []
    for line in lsblk_output.splitlines():
        columns = line.split()
        if len(columns) >= 2 and columns[1] == "disk":
            disks.append(columns[0])
    return disks


class DiskHealthChecker:
    """Prints the SMART health status of each disk."""

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        out: Optional[TextIO] = None,
        block_device_check: Optional[Callable[[str], bool]] = None,
        list_command: Optional[List[str]] = None,
    ):
        self.runner = runner or get_runner()
        self.out = out or sys.stdout
        self.block_device_check = block_device_check or is_block_device
        self.list_command = list_command or LIST_DISKS_COMMAND

    def list_disks(self) -> Optional[List[str]]:
        """
        Enumerate disk device names.

        Returns:
            Disk names, or None when the block device listing is unavailable
        """
        if not self.runner.is_available(self.list_command[0]):
            return None

        result = self.runner.run(self.list_command)
        if result.failed:
            logger.warning(f"Listing block devices failed: {result.stderr.strip()}")
            return None
        return parse_disk_names(result.stdout)

    def check_disk(self, name: str) -> DiskHealthOutcome:
        """Print the health status of one disk."""
        device = f"/dev/{name}"
        self._print(CHECKING_MESSAGE.format(device=device))

        if not self._smart_supported(device):
            self._print(NOT_SUPPORTED_MESSAGE.format(device=device))
            return DiskHealthOutcome.NOT_SUPPORTED

        health = self.runner.run([SMARTCTL, "-H", device])
        report = health.stdout.rstrip("\n")
        if report.strip():
            self._print(report)
        else:
            logger.warning(f"smartctl -H {device} returned no output: {health.stderr.strip()}")
            self._print(HEALTH_UNREADABLE_MESSAGE.format(device=device))
        return DiskHealthOutcome.REPORTED

    def run(self) -> Optional[Dict[str, DiskHealthOutcome]]:
        """
        Check every disk.

        Returns:
            Outcome per disk name, or None when disks could not be listed
        """
        disks = self.list_disks()
        if disks is None:
            return None
        return self.check_disks(disks)

    def check_disks(self, disks: List[str]) -> Dict[str, DiskHealthOutcome]:
        """Check each listed disk that is a block device under /dev."""
        outcomes = {}
        for name in disks:
            if not self.block_device_check(f"/dev/{name}"):
                logger.debug(f"/dev/{name} is not a block device, skipping")
                continue
            outcomes[name] = self.check_disk(name)
        return outcomes

    def _smart_supported(self, device: str) -> bool:
        if not self.runner.is_available(SMARTCTL):
            return False
        info = self.runner.run([SMARTCTL, "-i", device])
        return SMART_AVAILABLE_MARKER in info.stdout

    def _print(self, message: str) -> None:
        print(message, file=self.out)
