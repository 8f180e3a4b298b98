# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Descriptive statistics over timing samples."""

from dataclasses import asdict, dataclass

import numpy as np

__all__ = [
    "SampleStats",
    "calculate_stats",
]


@dataclass(slots=True, frozen=True)
class SampleStats:
    """Summary of one series of samples.

    Attributes:
        mean: Arithmetic mean, rounded to 2 decimals
        median: Middle value (mean of the middle pair for even counts), rounded to 2 decimals
        min: Smallest sample
        max: Largest sample
        std: Population standard deviation, rounded to 2 decimals
        count: Number of samples
    """

    mean: float = 0.0
    median: float = 0.0
    min: float = 0.0
    max: float = 0.0
    std: float = 0.0
    count: int = 0

    def to_dict(self) -> dict[str, float | int]:
        return asdict(self)


def calculate_stats(values: list[float]) -> SampleStats:
    """Compute SampleStats for ``values``. An empty series yields all zeros.

    Example:
        >>> calculate_stats([10, 20, 30])
        SampleStats(mean=20.0, median=20.0, min=10.0, max=30.0, std=8.16, count=3)
    """
    if len(values) == 0:
        return SampleStats()

    samples = np.sort(np.asarray(values, dtype=float))
    return SampleStats(
        mean=round(float(np.mean(samples)), 2),
        median=round(float(np.median(samples)), 2),
        min=float(samples[0]),
        max=float(samples[-1]),
        std=round(float(np.std(samples)), 2),
        count=int(samples.size),
    )
