# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from esbench.persistence.models import (
    BenchmarkResult,
    FullTextSearchResult,
    FuzzySearchResult,
    IndexingBatchResult,
    IndexingMetrics,
    RawBenchmarkData,
    RawIndexingData,
    RawSearchData,
    RawUpdateData,
    SearchMetrics,
    UpdateBatchResult,
    UpdateMetrics,
)
from esbench.persistence.result_store import (
    ResultFileStore,
    build_benchmark_result,
    is_result_file,
)

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
    "ResultFileStore",
    "SearchMetrics",
    "UpdateBatchResult",
    "UpdateMetrics",
    "build_benchmark_result",
    "is_result_file",
]
