# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""esbench - Search engine benchmark campaigns and result aggregation."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("esbench")
except PackageNotFoundError:
    __version__ = "unknown"
