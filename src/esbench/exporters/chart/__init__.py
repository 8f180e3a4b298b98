# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Chart data exporters."""

from esbench.exporters.chart.chart_base_exporter import ChartBaseExporter
from esbench.exporters.chart.chart_csv_exporter import ChartDataCsvExporter
from esbench.exporters.chart.chart_exporter_config import ChartExporterConfig
from esbench.exporters.chart.chart_json_exporter import ChartDataJsonExporter

__all__ = [
    "ChartBaseExporter",
    "ChartDataCsvExporter",
    "ChartDataJsonExporter",
    "ChartExporterConfig",
]
