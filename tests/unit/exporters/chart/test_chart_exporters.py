# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the chart data JSON and CSV exporters."""

import csv
import io

import orjson
import pytest

from esbench.exporters.chart import (
    ChartDataCsvExporter,
    ChartDataJsonExporter,
    ChartExporterConfig,
)
from esbench.orchestrator.aggregation.chart_data import assemble
from esbench.orchestrator.aggregation.models import Dataset


@pytest.fixture
def chart_data():
    batch = Dataset(name="Batch Size Scaling", variable="documentsPerBatch")
    batch.sample_set(100).add(indexing=100.0, search=15.0, update=50.0, total=500.0)
    batch.sample_set(100).add(indexing=120.0, search=17.0, update=60.0, total=600.0)
    batch.sample_set(400).add(indexing=300.0, search=16.0, update=90.0, total=900.0)

    index = Dataset(name="Index Type Comparison", variable="indexType")
    index.sample_set("ngram").add(indexing=80.0, search=9.0, update=40.0, total=300.0)

    return assemble({batch.name: batch, index.name: index})


@pytest.fixture
def exporter_config(chart_data, tmp_path):
    return ChartExporterConfig(chart_data=chart_data, output_dir=tmp_path / "charts")


class TestChartDataJsonExporter:
    def test_file_name(self, exporter_config):
        assert ChartDataJsonExporter(exporter_config).get_file_name() == "chart_data.json"

    @pytest.mark.asyncio
    async def test_export_writes_datasets(self, exporter_config):
        path = await ChartDataJsonExporter(exporter_config).export()

        assert path == exporter_config.output_dir / "chart_data.json"
        data = orjson.loads(path.read_bytes())

        names = [d["datasetName"] for d in data["datasets"]]
        assert names == ["Batch Size Scaling", "Index Type Comparison"]

        batch = data["datasets"][0]
        assert batch["sweptFieldName"] == "documentsPerBatch"
        assert [p["value"] for p in batch["points"]] == [100, 400]
        assert batch["points"][0]["stats"]["total"]["mean"] == 550.0
        assert batch["points"][0]["stats"]["total"]["count"] == 2
        assert batch["rawPoints"][0]["rawValues"]["indexing"] == [100.0, 120.0]

    @pytest.mark.asyncio
    async def test_export_empty(self, tmp_path):
        config = ChartExporterConfig(chart_data=[], output_dir=tmp_path)
        path = await ChartDataJsonExporter(config).export()

        assert orjson.loads(path.read_bytes()) == {"datasets": []}


class TestChartDataCsvExporter:
    def test_file_name(self, exporter_config):
        assert ChartDataCsvExporter(exporter_config).get_file_name() == "chart_data.csv"

    @pytest.mark.asyncio
    async def test_export_layout(self, exporter_config):
        path = await ChartDataCsvExporter(exporter_config).export()

        rows = list(csv.reader(io.StringIO(path.read_text())))
        header = rows[0]
        assert header[:3] == ["dataset_name", "swept_field", "value"]
        assert header[3:9] == [
            "indexing_mean",
            "indexing_median",
            "indexing_min",
            "indexing_max",
            "indexing_std",
            "indexing_count",
        ]
        assert header[-1] == "total_count"
        assert len(header) == 3 + 4 * 6

        data_rows = rows[1:4]
        assert [r[:3] for r in data_rows] == [
            ["Batch Size Scaling", "documentsPerBatch", "100"],
            ["Batch Size Scaling", "documentsPerBatch", "400"],
            ["Index Type Comparison", "indexType", "ngram"],
        ]
        first = dict(zip(header, data_rows[0], strict=True))
        assert first["total_mean"] == "550.00"
        assert first["total_std"] == "50.00"
        assert first["total_count"] == "2"

        assert rows[4] == []
        assert rows[5] == ["Metadata"]
        assert ["Number of Datasets", "2"] in rows
        assert ["Number of Points", "3"] in rows

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, ""),
            (1.5, "1.50"),
            (3, "3"),
            (float("inf"), "inf"),
            (float("-inf"), "-inf"),
        ],
    )
    def test_format_number(self, exporter_config, value, expected):
        assert ChartDataCsvExporter(exporter_config)._format_number(value) == expected
