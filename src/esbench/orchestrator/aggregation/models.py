# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""In-memory accumulation of timing samples, grouped by dataset and swept value."""

from dataclasses import dataclass, field
from typing import Any

from esbench.common.config.benchmark_config import SweepValue
from esbench.orchestrator.aggregation.extraction import coerce_numeric

__all__ = [
    "METRIC_NAMES",
    "Dataset",
    "RawSampleSet",
]

METRIC_NAMES = ("indexing", "search", "update", "total")


@dataclass(slots=True)
class RawSampleSet:
    """Raw samples collected for one swept value."""

    indexing: list[float] = field(default_factory=list)
    search: list[float] = field(default_factory=list)
    update: list[float] = field(default_factory=list)
    total: list[float] = field(default_factory=list)
    timestamps: list[str] = field(default_factory=list)

    def add(
        self,
        indexing: float,
        search: float,
        update: float,
        total: float,
        timestamp: str | None = None,
    ) -> None:
        self.indexing.append(indexing)
        self.search.append(search)
        self.update.append(update)
        self.total.append(total)
        if timestamp is not None:
            self.timestamps.append(timestamp)

    def metric(self, name: str) -> list[float]:
        return getattr(self, name)

    def to_dict(self) -> dict[str, list]:
        return {
            "indexing": list(self.indexing),
            "search": list(self.search),
            "update": list(self.update),
            "total": list(self.total),
            "timestamps": list(self.timestamps),
        }


@dataclass(slots=True)
class Dataset:
    """Samples of every result file sharing one dataset name.

    Attributes:
        name: Dataset (chart) name
        variable: Name of the swept field
        samples: Swept value to its raw samples, in first-seen order
    """

    name: str
    variable: str
    samples: dict[SweepValue, RawSampleSet] = field(default_factory=dict)

    def sample_set(self, value: SweepValue) -> RawSampleSet:
        """Samples for ``value``. Numeric text shares the bucket of its number, so "1" and 1 are one point."""
        if isinstance(value, str):
            value = coerce_numeric(value)
        if value not in self.samples:
            self.samples[value] = RawSampleSet()
        return self.samples[value]

    @property
    def sample_count(self) -> int:
        return sum(len(s.total) for s in self.samples.values())

    def to_json_dict(self) -> dict[str, Any]:
        # JSON object keys are always strings; a list keeps the value types
        return {
            "name": self.name,
            "variable": self.variable,
            "values": [
                {"value": value, "samples": samples.to_dict()}
                for value, samples in self.samples.items()
            ],
        }
