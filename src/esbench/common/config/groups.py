# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from cyclopts import Group


class Groups:
    """CLI help groups, in display order."""

    PARAMETER_SWEEP = Group("Parameter Sweep", sort_key=1)
    BASE_CONFIGURATION = Group("Base Configuration", sort_key=2)
    EXECUTION = Group("Execution", sort_key=3)
    AGGREGATION = Group("Aggregation", sort_key=4)
    OUTPUT = Group("Output", sort_key=5)
