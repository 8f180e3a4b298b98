# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Turn aggregated datasets into plot-ready chart data."""

import math

from esbench.common.config.base_config import CamelModel
from esbench.common.config.benchmark_config import SweepValue
from esbench.orchestrator.aggregation.models import METRIC_NAMES, Dataset
from esbench.orchestrator.aggregation.stats import SampleStats, calculate_stats

__all__ = [
    "ChartData",
    "ChartPoint",
    "MetricSamples",
    "MetricStats",
    "RawChartPoint",
    "assemble",
    "assemble_one",
    "available_dataset_names",
    "value_sort_key",
]


class MetricStats(CamelModel):
    indexing: SampleStats
    search: SampleStats
    update: SampleStats
    total: SampleStats


class MetricSamples(CamelModel):
    indexing: list[float]
    search: list[float]
    update: list[float]
    total: list[float]


class ChartPoint(CamelModel):
    value: SweepValue
    stats: MetricStats


class RawChartPoint(CamelModel):
    value: SweepValue
    raw_values: MetricSamples


class ChartData(CamelModel):
    """One dataset ready to plot.

    Attributes:
        dataset_name: Name shared by every result in the dataset
        swept_field_name: Field the dataset varies
        points: Summary statistics per swept value, in value order
        raw_points: Raw samples per swept value, in the same order as points
    """

    dataset_name: str
    swept_field_name: str
    points: list[ChartPoint]
    raw_points: list[RawChartPoint]


def value_sort_key(value: SweepValue) -> tuple[int, float, str]:
    """Numbers (and numeric strings) ascend numerically, before other values in lexical order."""
    if not isinstance(value, bool):
        try:
            number = float(value)
        except (TypeError, ValueError):
            pass
        else:
            if math.isfinite(number):
                return (0, number, "")
    return (1, 0.0, str(value))


def _to_chart_data(dataset: Dataset) -> ChartData:
    ordered = sorted(dataset.samples.items(), key=lambda item: value_sort_key(item[0]))

    points = [
        ChartPoint(
            value=value,
            stats=MetricStats(
                **{name: calculate_stats(samples.metric(name)) for name in METRIC_NAMES}
            ),
        )
        for value, samples in ordered
    ]
    raw_points = [
        RawChartPoint(
            value=value,
            raw_values=MetricSamples(
                **{name: list(samples.metric(name)) for name in METRIC_NAMES}
            ),
        )
        for value, samples in ordered
    ]
    return ChartData(
        dataset_name=dataset.name,
        swept_field_name=dataset.variable,
        points=points,
        raw_points=raw_points,
    )


def assemble(datasets: dict[str, Dataset]) -> list[ChartData]:
    """Chart data for every dataset, ordered by dataset name."""
    return [_to_chart_data(datasets[name]) for name in available_dataset_names(datasets)]


def assemble_one(datasets: dict[str, Dataset], name: str) -> ChartData | None:
    """Chart data for the dataset called ``name``, or None if there is none."""
    dataset = datasets.get(name)
    return _to_chart_data(dataset) if dataset is not None else None


def available_dataset_names(datasets: dict[str, Dataset]) -> list[str]:
    return sorted(datasets)
