# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Schema of persisted benchmark results and of raw driver output."""

from typing import Any

from pydantic import Field, model_validator

from esbench.common.config.base_config import CamelModel
from esbench.common.config.benchmark_config import BenchmarkConfig

__all__ = [
    "BenchmarkResult",
    "FullTextSearchResult",
    "FuzzySearchResult",
    "IndexingBatchResult",
    "IndexingMetrics",
    "RawBenchmarkData",
    "RawIndexingData",
    "RawSearchData",
    "RawUpdateData",
    "SearchMetrics",
    "UpdateBatchResult",
    "UpdateMetrics",
]


class IndexingBatchResult(CamelModel):
    batch_number: int
    documents_in_batch: int
    indexing_time_ms: float
    errors: bool = False
    error_count: int | None = None


class UpdateBatchResult(CamelModel):
    batch_number: int
    documents_in_batch: int
    update_time_ms: float
    errors: bool = False
    error_count: int | None = None


class FullTextSearchResult(CamelModel):
    term: str
    search_time_ms: float
    results_count: int = 0
    total_hits: int = 0


class FuzzySearchResult(CamelModel):
    term: str
    fuzziness: int | str = "AUTO"
    search_time_ms: float
    results_count: int = 0
    total_hits: int = 0


class RawIndexingData(CamelModel):
    total_documents: int
    total_batches: int
    batch_results: list[IndexingBatchResult] = Field(default_factory=list)
    refresh_time_ms: float = 0.0


class RawUpdateData(CamelModel):
    total_documents_updated: int
    total_update_batches: int
    update_batch_results: list[UpdateBatchResult] = Field(default_factory=list)
    reindexing_time_ms: float = 0.0


class RawSearchData(CamelModel):
    full_text_search_results: list[FullTextSearchResult] = Field(default_factory=list)
    fuzzy_search_results: list[FuzzySearchResult] = Field(default_factory=list)


class RawBenchmarkData(CamelModel):
    """What a workload driver hands back after one run, before metrics are derived."""

    config: BenchmarkConfig
    indexing_data: RawIndexingData
    update_data: RawUpdateData
    search_data: RawSearchData
    total_test_duration_ms: float


class IndexingMetrics(RawIndexingData):
    total_indexing_time_ms: float
    average_time_per_document_ms: float = 0.0
    average_time_per_batch_ms: float = 0.0


class UpdateMetrics(RawUpdateData):
    total_update_time_ms: float
    average_time_per_update_ms: float = 0.0
    average_time_per_update_batch_ms: float = 0.0


class SearchMetrics(RawSearchData):
    # Older result files may lack the precomputed averages.
    average_full_text_search_time_ms: float | None = None
    average_fuzzy_search_time_ms: float | None = None


class BenchmarkResult(CamelModel):
    """One persisted benchmark run.

    The core schema is fixed. Any other top-level keys found in a result file
    are kept in ``extensions`` instead of being dropped or rejected.
    """

    timestamp: str
    test_id: str
    config: BenchmarkConfig
    indexing_metrics: IndexingMetrics
    update_metrics: UpdateMetrics
    search_metrics: SearchMetrics
    total_test_duration_ms: float
    extensions: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def collect_extensions(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        extensions = data.get("extensions")
        if extensions is not None and not isinstance(extensions, dict):
            raise ValueError(
                f"extensions must be an object, got {type(extensions).__name__}"
            )

        known: set[str] = set()
        for name, field in cls.model_fields.items():
            known.add(name)
            if field.alias:
                known.add(field.alias)

        unknown = {key: value for key, value in data.items() if key not in known}
        if not unknown:
            return data

        core = {key: value for key, value in data.items() if key in known}
        core["extensions"] = {**(extensions or {}), **unknown}
        return core
