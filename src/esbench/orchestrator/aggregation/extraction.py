# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Recover the dataset, swept field and swept value of a persisted result."""

from typing import NamedTuple

from esbench.common.config.benchmark_config import BenchmarkConfig, SweepValue
from esbench.common.config.campaign_config import VariableType
from esbench.orchestrator.variations import get_config_value
from esbench.persistence.models import BenchmarkResult, SearchMetrics

__all__ = [
    "SweepInfo",
    "calculate_search_average",
    "coerce_numeric",
    "extract_sweep_from_label",
    "extract_sweep_info",
]

# Labels look like <prefix>-<campaign>-<field>-<value>
_MIN_LABEL_PARTS = 4


class SweepInfo(NamedTuple):
    """Where a result belongs in the aggregated output."""

    chart_name: str
    variable: str
    value: SweepValue


def coerce_numeric(text: str) -> SweepValue:
    """Turn numeric-looking text into an int or float; leave anything else as is.

    Example:
        >>> coerce_numeric("100"), coerce_numeric("0.5"), coerce_numeric("AUTO")
        (100, 0.5, 'AUTO')
    """
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return text
    # "nan" and "inf" parse as floats but are not sweep values
    return number if number == number and abs(number) != float("inf") else text


def extract_sweep_from_label(config: BenchmarkConfig) -> tuple[str, SweepValue] | None:
    """Infer (field, value) from the configuration label.

    A ``-<field>-`` segment for a known sweepable field is looked for first;
    when several match, the rightmost one wins and the value is read from the
    configuration itself. Otherwise the label is split on ``-`` and the third
    and fourth segments are taken as field and value.
    """
    label = config.index_name

    best: tuple[int, VariableType] | None = None
    for variable in VariableType:
        position = label.rfind(f"-{variable.value}-")
        if position >= 0 and (best is None or position > best[0]):
            best = (position, variable)

    if best is not None:
        variable = best[1]
        return variable.value, get_config_value(config, variable)

    parts = label.split("-")
    if len(parts) < _MIN_LABEL_PARTS:
        return None
    return parts[2], coerce_numeric(parts[3])


def extract_sweep_info(result: BenchmarkResult) -> SweepInfo | None:
    """Locate a result in the aggregated output, or None when it has no dataset.

    The explicit sweep tag is used when present, then the label.
    """
    config = result.config
    if not config.chart_name:
        return None

    if config.sweep is not None:
        return SweepInfo(config.chart_name, config.sweep.field, config.sweep.value)

    extracted = extract_sweep_from_label(config)
    if extracted is None:
        return None
    return SweepInfo(config.chart_name, *extracted)


def calculate_search_average(search: SearchMetrics) -> float:
    """Single search figure of a run.

    When both precomputed averages exist this is their midpoint, which weights
    full-text and fuzzy equally regardless of how many terms each ran.
    Otherwise it is the mean over every raw per-term sample, or 0 without any.
    """
    if (
        search.average_full_text_search_time_ms is not None
        and search.average_fuzzy_search_time_ms is not None
    ):
        return (
            search.average_full_text_search_time_ms
            + search.average_fuzzy_search_time_ms
        ) / 2

    samples = [r.search_time_ms for r in search.full_text_search_results] + [
        r.search_time_ms for r in search.fuzzy_search_results
    ]
    return sum(samples) / len(samples) if samples else 0.0
