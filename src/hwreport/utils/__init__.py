# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Utility modules for the hardware report.

- core: process execution and dependency management
- system: report sections, text filters and disk health
- config: packaged YAML catalogs and package metadata
- logging: logging configuration
- cli: argument parsing and command implementations
"""
