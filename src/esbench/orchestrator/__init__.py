# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Campaign generation and execution."""

from esbench.orchestrator.models import (
    CampaignResult,
    ProgressCallback,
    RunFailure,
    RunFunction,
    RunOutcome,
)
from esbench.orchestrator.orchestrator import CampaignExecutor, run_campaign
from esbench.orchestrator.runners import (
    SimulatedWorkloadDriver,
    WorkloadDriver,
    create_benchmark_runner,
    load_driver,
)
from esbench.orchestrator.variations import (
    apply_variation,
    create_base_config,
    generate_chart_name,
    generate_configurations,
    generate_numeric_values,
    get_config_value,
    make_label,
)

__all__ = [
    "CampaignExecutor",
    "CampaignResult",
    "ProgressCallback",
    "RunFailure",
    "RunFunction",
    "RunOutcome",
    "SimulatedWorkloadDriver",
    "WorkloadDriver",
    "apply_variation",
    "create_base_config",
    "generate_chart_name",
    "generate_configurations",
    "generate_numeric_values",
    "get_config_value",
    "load_driver",
    "make_label",
    "run_campaign",
]
