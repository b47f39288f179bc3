# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Command line entry point for the hardware report.
"""

import atexit
import os
import sys
from typing import List, Optional

from hwreport.utils.cli import create_argument_parser
from hwreport.utils.cli.commands import run_hardware_report
from hwreport.utils.logging import cleanup_logging, setup_command_logging

PRIVILEGE_ERROR_MESSAGE = "This tool must be run as root."


def check_root_privileges() -> bool:
    """Check if running with root privileges."""
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        int: Exit code (0 for success, 1 without root privileges or on internal failure)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not check_root_privileges():
        print(PRIVILEGE_ERROR_MESSAGE)
        return 1

    setup_command_logging(verbose=args.verbose, debug=args.debug, log_file=args.log_file)
    atexit.register(cleanup_logging)

    return run_hardware_report(install=not args.no_install, debug=args.debug)


if __name__ == "__main__":
    sys.exit(main())
