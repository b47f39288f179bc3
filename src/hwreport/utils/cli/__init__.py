# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
CLI utilities package.

Contains the argument parser and command implementations.
"""

from .parsers import create_argument_parser

__all__ = ["create_argument_parser"]
