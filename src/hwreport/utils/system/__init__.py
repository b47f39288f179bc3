# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Hardware report package.

Loads the section catalog, runs each section's external command through
the text filters and prints the report.
"""

from .catalog import load_sections
from .disk_health import DiskHealthChecker, DiskHealthOutcome
from .filters import apply_filter
from .report import CLOSING_BANNER, OPENING_BANNER, HardwareReport
from .schema import Section, SectionFilter, SectionKind
from .sections import SectionGenerator, not_available_message

__all__ = [
    # Main classes
    "HardwareReport",
    "SectionGenerator",
    "DiskHealthChecker",
    "DiskHealthOutcome",
    # Schema
    "Section",
    "SectionFilter",
    "SectionKind",
    # Functions
    "load_sections",
    "apply_filter",
    "not_available_message",
    # Constants
    "OPENING_BANNER",
    "CLOSING_BANNER",
]
