# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Core utilities package.

This package contains process execution and dependency management.
"""

from . import process
from .process import CommandRunner, ProcessResult, get_runner

__all__ = [
    'CommandRunner',
    'ProcessResult',
    'get_runner',
    'process',
]
