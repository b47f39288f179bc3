# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Hardware report command implementation.
"""

import logging
from typing import Optional, TextIO

from hwreport.utils.logging import log_system_info

logger = logging.getLogger(__name__)


def run_hardware_report(install: bool = True, debug: bool = False, out: Optional[TextIO] = None) -> int:
    """
    Print the hardware report.

    Section failures degrade inside the report and never change the exit code.

    Args:
        install: Whether to install missing tools
        debug: Whether to log full tracebacks
        out: Output stream (stdout by default)

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    try:
        from hwreport.utils.system import HardwareReport

        log_system_info()

        report = HardwareReport(install=install, out=out)
        report.generate()

        logger.debug("Hardware report completed")
        return 0

    except Exception as e:
        logger.error(f"Error generating hardware report: {e}", exc_info=debug)
        return 1
