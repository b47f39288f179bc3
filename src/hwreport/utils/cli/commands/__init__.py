# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
CLI command implementations package.
"""

from .report import run_hardware_report

__all__ = ['run_hardware_report']
