# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for esbench unit tests."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import orjson
import pytest

from esbench.common.config import BenchmarkConfig
from esbench.orchestrator.variations import create_base_config


@pytest.fixture
def base_config() -> BenchmarkConfig:
    """Campaign base configuration with default sizes and a chart name."""
    return create_base_config(index_name="test-campaign", chart_name="Test Chart")


def make_result_data(
    config: BenchmarkConfig,
    indexing_ms: float = 100.0,
    update_ms: float = 50.0,
    total_ms: float = 500.0,
    full_text_avg: float | None = 10.0,
    fuzzy_avg: float | None = 20.0,
    full_text_times: list[float] | None = None,
    fuzzy_times: list[float] | None = None,
    timestamp: str = "2026-01-01T00:00:00.000Z",
    test_id: str = "benchmark_test",
    **extra: Any,
) -> dict[str, Any]:
    """Build the on-disk (camelCase) form of a persisted result."""
    search_metrics: dict[str, Any] = {
        "fullTextSearchResults": [
            {"term": f"t{i}", "searchTimeMs": t, "resultsCount": 1, "totalHits": 1}
            for i, t in enumerate(full_text_times or [])
        ],
        "fuzzySearchResults": [
            {"term": f"f{i}", "fuzziness": "AUTO", "searchTimeMs": t}
            for i, t in enumerate(fuzzy_times or [])
        ],
    }
    if full_text_avg is not None:
        search_metrics["averageFullTextSearchTimeMs"] = full_text_avg
    if fuzzy_avg is not None:
        search_metrics["averageFuzzySearchTimeMs"] = fuzzy_avg

    return {
        "timestamp": timestamp,
        "testId": test_id,
        "config": config.to_json_dict(),
        "indexingMetrics": {
            "totalDocuments": config.total_documents,
            "totalBatches": config.number_of_batches,
            "batchResults": [],
            "totalIndexingTimeMs": indexing_ms,
            "averageTimePerDocumentMs": 0.1,
            "averageTimePerBatchMs": 10.0,
            "refreshTimeMs": 5.0,
        },
        "updateMetrics": {
            "totalDocumentsUpdated": 10,
            "totalUpdateBatches": 2,
            "updateBatchResults": [],
            "totalUpdateTimeMs": update_ms,
            "averageTimePerUpdateMs": 5.0,
            "averageTimePerUpdateBatchMs": 25.0,
            "reindexingTimeMs": 3.0,
        },
        "searchMetrics": search_metrics,
        "totalTestDurationMs": total_ms,
        **extra,
    }


@pytest.fixture
def result_data() -> Callable[..., dict[str, Any]]:
    """Factory for in-memory result dicts: ``result_data(config, **metrics)``."""
    return make_result_data


@pytest.fixture
def write_result() -> Callable[..., Path]:
    """Write a result file into a directory: ``write_result(dir, name, config, **metrics)``."""

    def _write(directory: Path, name: str, config: BenchmarkConfig, **kwargs: Any) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        data = make_result_data(config, test_id=path.stem, **kwargs)
        path.write_bytes(orjson.dumps(data))
        return path

    return _write
