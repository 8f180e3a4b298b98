# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Reduction of persisted results into chart datasets."""

from esbench.orchestrator.aggregation.cache import AggregationCache, CacheFile
from esbench.orchestrator.aggregation.chart_data import (
    ChartData,
    ChartPoint,
    MetricSamples,
    MetricStats,
    RawChartPoint,
    assemble,
    assemble_one,
    available_dataset_names,
    value_sort_key,
)
from esbench.orchestrator.aggregation.extraction import (
    SweepInfo,
    calculate_search_average,
    coerce_numeric,
    extract_sweep_from_label,
    extract_sweep_info,
)
from esbench.orchestrator.aggregation.models import METRIC_NAMES, Dataset, RawSampleSet
from esbench.orchestrator.aggregation.stats import SampleStats, calculate_stats
from esbench.orchestrator.aggregation.stream import StreamAggregator, default_cache_file

__all__ = [
    "AggregationCache",
    "CacheFile",
    "ChartData",
    "ChartPoint",
    "Dataset",
    "METRIC_NAMES",
    "MetricSamples",
    "MetricStats",
    "RawChartPoint",
    "RawSampleSet",
    "SampleStats",
    "StreamAggregator",
    "SweepInfo",
    "assemble",
    "assemble_one",
    "available_dataset_names",
    "calculate_search_average",
    "calculate_stats",
    "coerce_numeric",
    "default_cache_file",
    "extract_sweep_from_label",
    "extract_sweep_info",
    "value_sort_key",
]
