# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Argument parser setup for the CLI.
"""

import argparse

from hwreport.utils.config import get_dist_version


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser ready for argument parsing
    """
    parser = argparse.ArgumentParser(
        prog="hwreport",
        description="Print a hardware inventory of this Linux system (must be run as root)",
        epilog="""
The report covers system and motherboard identification, CPU, network and
display adapters, USB controllers, memory, disks, audio and GPU devices,
operating system, network configuration, BIOS, uptime, temperatures and
SMART disk health. Missing tools are installed with apt-get.

EXAMPLES:
  sudo hwreport                     # Print the full report
  sudo hwreport --no-install        # Do not install missing tools
  sudo hwreport -d --log-file hw.log
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {get_dist_version()}")

    parser.add_argument("--verbose", "-v", action="store_true", help="Display informational log messages")

    parser.add_argument("--debug", "-d", action="store_true", help="Display debug output with full traceback")

    parser.add_argument(
        "--no-install", action="store_true", help="Report missing tools without attempting to install them"
    )

    parser.add_argument("--log-file", metavar="PATH", help="Also write debug logs to PATH")

    return parser
