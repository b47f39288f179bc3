# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

import importlib.metadata

try:
    __version__ = importlib.metadata.version("hwreport")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"
