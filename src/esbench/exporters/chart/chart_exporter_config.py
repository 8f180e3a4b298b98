# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Configuration for chart data exporters."""

from dataclasses import dataclass
from pathlib import Path

from esbench.orchestrator.aggregation.chart_data import ChartData


@dataclass(slots=True)
class ChartExporterConfig:
    """Configuration for chart data exporters.

    Attributes:
        chart_data: Datasets to export, in output order
        output_dir: Directory where the export file will be written
    """

    chart_data: list[ChartData]
    output_dir: Path
