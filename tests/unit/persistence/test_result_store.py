# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for ResultFileStore and metric derivation."""

import re

import orjson
import pytest

from esbench.common.exceptions import ResultParseError
from esbench.persistence import (
    FullTextSearchResult,
    FuzzySearchResult,
    IndexingBatchResult,
    RawBenchmarkData,
    RawIndexingData,
    RawSearchData,
    RawUpdateData,
    ResultFileStore,
    UpdateBatchResult,
    build_benchmark_result,
    is_result_file,
)


@pytest.fixture
def raw_data(base_config):
    return RawBenchmarkData(
        config=base_config,
        indexing_data=RawIndexingData(
            total_documents=1000,
            total_batches=2,
            batch_results=[
                IndexingBatchResult(batch_number=1, documents_in_batch=500, indexing_time_ms=100.0),
                IndexingBatchResult(batch_number=2, documents_in_batch=500, indexing_time_ms=233.0),
            ],
            refresh_time_ms=12.5,
        ),
        update_data=RawUpdateData(
            total_documents_updated=3,
            total_update_batches=1,
            update_batch_results=[
                UpdateBatchResult(batch_number=1, documents_in_batch=3, update_time_ms=10.0)
            ],
        ),
        search_data=RawSearchData(
            full_text_search_results=[
                FullTextSearchResult(term="a", search_time_ms=4.0),
                FullTextSearchResult(term="b", search_time_ms=6.0),
            ],
            fuzzy_search_results=[FuzzySearchResult(term="c", search_time_ms=9.0)],
        ),
        total_test_duration_ms=400.0,
    )


class TestBuildBenchmarkResult:
    def test_totals_and_averages(self, raw_data):
        result = build_benchmark_result(raw_data, test_id="t", timestamp="now")

        assert result.indexing_metrics.total_indexing_time_ms == 333.0
        assert result.indexing_metrics.average_time_per_document_ms == 0.33
        assert result.indexing_metrics.average_time_per_batch_ms == 166.5
        assert result.indexing_metrics.refresh_time_ms == 12.5
        assert result.update_metrics.total_update_time_ms == 10.0
        assert result.update_metrics.average_time_per_update_ms == 3.33
        assert result.search_metrics.average_full_text_search_time_ms == 5.0
        assert result.search_metrics.average_fuzzy_search_time_ms == 9.0
        assert result.total_test_duration_ms == 400.0

    def test_zero_counts_yield_zero_averages(self, base_config):
        raw = RawBenchmarkData(
            config=base_config,
            indexing_data=RawIndexingData(total_documents=0, total_batches=0),
            update_data=RawUpdateData(total_documents_updated=0, total_update_batches=0),
            search_data=RawSearchData(),
            total_test_duration_ms=0.0,
        )
        result = build_benchmark_result(raw, test_id="t", timestamp="now")

        assert result.indexing_metrics.average_time_per_document_ms == 0.0
        assert result.update_metrics.average_time_per_update_batch_ms == 0.0
        assert result.search_metrics.average_full_text_search_time_ms == 0.0


class TestIsResultFile:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("benchmark_2026-01-01_standard_1000-docs_ab12cd34.json", True),
            ("benchmark_.json", True),
            ("campaign_summary.json", False),
            ("benchmark_2026.json.tmp", False),
            ("notes.txt", False),
        ],
    )
    def test_names(self, name, expected):
        assert is_result_file(name) is expected


class TestResultFileStore:
    def test_save_writes_camel_case_file(self, raw_data, tmp_path):
        path = ResultFileStore(tmp_path / "results").save(raw_data)

        assert path.parent == tmp_path / "results"
        assert re.fullmatch(
            r"benchmark_\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}-\d{3}Z_standard_1000-docs_[0-9a-f]{8}\.json",
            path.name,
        )
        data = orjson.loads(path.read_bytes())
        assert data["testId"] == path.stem
        assert data["config"]["indexName"] == raw_data.config.index_name
        assert data["indexingMetrics"]["totalIndexingTimeMs"] == 333.0
        assert "extensions" in data

    def test_two_saves_never_collide(self, raw_data, tmp_path):
        store = ResultFileStore(tmp_path)
        first = store.save(raw_data)
        second = store.save(raw_data)

        assert first != second
        assert store.list_result_files() == sorted([first, second])

    def test_load_round_trips_saved_file(self, raw_data, tmp_path):
        path = ResultFileStore(tmp_path).save(raw_data)
        loaded = ResultFileStore.load(path)

        assert loaded.config == raw_data.config
        assert loaded.indexing_metrics.batch_results == raw_data.indexing_data.batch_results

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ResultParseError, match="cannot read file"):
            ResultFileStore.load(tmp_path / "benchmark_missing.json")

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "benchmark_bad.json"
        path.write_text("{not json")

        with pytest.raises(ResultParseError, match="invalid JSON") as exc_info:
            ResultFileStore.load(path)
        assert exc_info.value.path == path

    def test_load_schema_mismatch(self, tmp_path):
        path = tmp_path / "benchmark_partial.json"
        path.write_bytes(orjson.dumps({"timestamp": "x", "testId": "y"}))

        with pytest.raises(ResultParseError, match="schema error"):
            ResultFileStore.load(path)

    def test_list_ignores_other_files(self, raw_data, tmp_path):
        store = ResultFileStore(tmp_path)
        saved = store.save(raw_data)
        (tmp_path / "README.md").write_text("x")
        (tmp_path / "summary.json").write_text("{}")
        (tmp_path / "benchmark_dir.json").mkdir()

        assert store.list_result_files() == [saved]

    def test_list_missing_directory(self, tmp_path):
        assert ResultFileStore(tmp_path / "absent").list_result_files() == []
