# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data models for campaign execution."""

from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, Field

from esbench.common.config.base_config import CamelModel
from esbench.common.config.benchmark_config import BenchmarkConfig

__all__ = [
    "CampaignResult",
    "ProgressCallback",
    "RunFailure",
    "RunFunction",
    "RunOutcome",
]


class RunOutcome(BaseModel):
    """Result of a single benchmark run.

    Attributes:
        success: Whether the run completed successfully
        result_ref: Reference to the persisted result (usually a file path)
        error: Error message if the run failed
    """

    success: bool
    result_ref: str | None = None
    error: str | None = None

    @classmethod
    def succeeded(cls, result_ref: str | Path | None = None) -> "RunOutcome":
        return cls(
            success=True,
            result_ref=str(result_ref) if result_ref is not None else None,
        )

    @classmethod
    def failed(cls, error: str) -> "RunOutcome":
        return cls(success=False, error=error)


class RunFailure(CamelModel):
    """One failed repetition of one configuration."""

    label: str
    repetition: int
    error: str


class CampaignResult(CamelModel):
    """Summary of an executed campaign.

    Attributes:
        campaign_id: Unique identifier of this campaign
        timestamp: ISO-8601 start time
        total_runs: Configurations times repetitions
        completed_runs: Runs that succeeded
        failed_runs: Runs that raised or reported failure
        execution_time_ms: Wall-clock duration of the whole campaign
        configurations: Every configuration, in execution order
        result_refs: References of successful runs, in completion order
        failures: Label, repetition and error of every failed run
    """

    campaign_id: str
    timestamp: str
    total_runs: int
    completed_runs: int
    failed_runs: int
    execution_time_ms: float
    configurations: list[BenchmarkConfig]
    result_refs: list[str] = Field(default_factory=list)
    failures: list[RunFailure] = Field(default_factory=list)

    @property
    def success_rate(self) -> float:
        return self.completed_runs / self.total_runs * 100 if self.total_runs else 0.0


RunFunction = Callable[[BenchmarkConfig], RunOutcome | str | Path | None]
ProgressCallback = Callable[[int, int], None]
