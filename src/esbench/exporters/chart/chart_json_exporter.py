# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""JSON exporter for chart data."""

import orjson

from esbench.exporters.chart.chart_base_exporter import ChartBaseExporter


class ChartDataJsonExporter(ChartBaseExporter):
    """Exports chart data to JSON, ready for a plotting front end.

    Output structure:
    {
        "datasets": [
            {
                "datasetName": "Batch Size Scaling",
                "sweptFieldName": "documentsPerBatch",
                "points": [{"value": 100, "stats": {"indexing": {...}, ...}}],
                "rawPoints": [{"value": 100, "rawValues": {"indexing": [...], ...}}]
            }
        ]
    }
    """

    def get_file_name(self) -> str:
        return "chart_data.json"

    def _generate_content(self) -> str:
        output = {"datasets": [chart.to_json_dict() for chart in self._chart_data]}
        return orjson.dumps(output, option=orjson.OPT_INDENT_2).decode("utf-8")
