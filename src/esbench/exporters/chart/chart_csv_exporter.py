# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CSV exporter for chart data."""

import csv
import io

from esbench.exporters.chart.chart_base_exporter import ChartBaseExporter
from esbench.orchestrator.aggregation.models import METRIC_NAMES

_STAT_NAMES = ("mean", "median", "min", "max", "std", "count")


class ChartDataCsvExporter(ChartBaseExporter):
    """Exports chart data to CSV format.

    Creates a CSV with two sections:
    - Statistics table (WIDE format - one row per dataset and swept value)
    - Metadata section
    """

    def get_file_name(self) -> str:
        return "chart_data.csv"

    def _generate_content(self) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf)

        # Section 1: dataset_name, swept_field, value, indexing_mean, ..., total_count
        header = ["dataset_name", "swept_field", "value"]
        for metric_name in METRIC_NAMES:
            header.extend(f"{metric_name}_{stat}" for stat in _STAT_NAMES)
        writer.writerow(header)

        num_points = 0
        for chart in self._chart_data:
            for point in chart.points:
                row = [chart.dataset_name, chart.swept_field_name, point.value]
                for metric_name in METRIC_NAMES:
                    stats = getattr(point.stats, metric_name)
                    row.extend(self._format_number(getattr(stats, stat)) for stat in _STAT_NAMES)
                writer.writerow(row)
                num_points += 1

        # Section 2: Metadata
        writer.writerow([])
        writer.writerow(["Metadata"])
        writer.writerow(["Field", "Value"])
        writer.writerow(["Number of Datasets", len(self._chart_data)])
        writer.writerow(["Number of Points", num_points])

        return buf.getvalue()

    def _format_number(self, value, decimals: int = 2) -> str:
        """Format a number for CSV output; None becomes an empty cell."""
        if value is None:
            return ""
        if isinstance(value, float):
            if value == float("inf"):
                return "inf"
            if value == float("-inf"):
                return "-inf"
            return f"{value:.{decimals}f}"
        return str(value)
