# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""File-per-run storage of benchmark results."""

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path

import orjson
from pydantic import ValidationError

from esbench.common.config.config_defaults import OutputDefaults
from esbench.common.exceptions import ResultParseError
from esbench.persistence.models import (
    BenchmarkResult,
    IndexingMetrics,
    RawBenchmarkData,
    SearchMetrics,
    UpdateMetrics,
)

logger = logging.getLogger(__name__)

__all__ = [
    "ResultFileStore",
    "build_benchmark_result",
    "is_result_file",
]


def is_result_file(name: str) -> bool:
    """True for ``benchmark_*.json`` file names."""
    return name.startswith(OutputDefaults.RESULT_FILE_PREFIX) and name.endswith(
        OutputDefaults.RESULT_FILE_SUFFIX
    )


def _file_timestamp(moment: datetime) -> str:
    # ISO-8601 with ':' and '.' swapped for '-' so it is safe in file names
    return moment.strftime("%Y-%m-%dT%H-%M-%S-") + f"{moment.microsecond // 1000:03d}Z"


def _ratio(total: float, count: int) -> float:
    return round(total / count, 2) if count else 0.0


def _mean(values: list[float]) -> float:
    return round(sum(values) / len(values), 2) if values else 0.0


def build_benchmark_result(
    raw: RawBenchmarkData, test_id: str, timestamp: str
) -> BenchmarkResult:
    """Derive the metric groups of a run from the driver's raw data.

    Totals are summed from the batch records and averages are rounded to
    two decimals. Zero counts yield zero averages.
    """
    indexing = raw.indexing_data
    total_indexing_time = sum(b.indexing_time_ms for b in indexing.batch_results)

    update = raw.update_data
    total_update_time = sum(b.update_time_ms for b in update.update_batch_results)

    search = raw.search_data

    return BenchmarkResult(
        timestamp=timestamp,
        test_id=test_id,
        config=raw.config,
        indexing_metrics=IndexingMetrics(
            **indexing.model_dump(),
            total_indexing_time_ms=total_indexing_time,
            average_time_per_document_ms=_ratio(
                total_indexing_time, indexing.total_documents
            ),
            average_time_per_batch_ms=_ratio(
                total_indexing_time, indexing.total_batches
            ),
        ),
        update_metrics=UpdateMetrics(
            **update.model_dump(),
            total_update_time_ms=total_update_time,
            average_time_per_update_ms=_ratio(
                total_update_time, update.total_documents_updated
            ),
            average_time_per_update_batch_ms=_ratio(
                total_update_time, update.total_update_batches
            ),
        ),
        search_metrics=SearchMetrics(
            **search.model_dump(),
            average_full_text_search_time_ms=_mean(
                [r.search_time_ms for r in search.full_text_search_results]
            ),
            average_fuzzy_search_time_ms=_mean(
                [r.search_time_ms for r in search.fuzzy_search_results]
            ),
        ),
        total_test_duration_ms=raw.total_test_duration_ms,
    )


class ResultFileStore:
    """Writes one JSON file per run and reads them back.

    File names follow ``benchmark_<timestamp>_<indexType>_<totalDocs>-docs_<suffix>.json``.
    The random suffix keeps two runs finishing in the same millisecond apart.
    """

    def __init__(self, results_dir: Path):
        self.results_dir = Path(results_dir)

    def save(self, raw: RawBenchmarkData) -> Path:
        """Persist one run and return the path of the written file."""
        now = datetime.now(timezone.utc)
        stamp = _file_timestamp(now)
        config = raw.config
        file_name = (
            f"{OutputDefaults.RESULT_FILE_PREFIX}{stamp}_{config.index_type}_"
            f"{config.total_documents}-docs_{uuid.uuid4().hex[:8]}"
            f"{OutputDefaults.RESULT_FILE_SUFFIX}"
        )

        result = build_benchmark_result(
            raw,
            test_id=file_name.removesuffix(OutputDefaults.RESULT_FILE_SUFFIX),
            timestamp=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        )

        self.results_dir.mkdir(parents=True, exist_ok=True)
        path = self.results_dir / file_name
        with open(path, "wb") as f:
            f.write(orjson.dumps(result.to_json_dict(), option=orjson.OPT_INDENT_2))

        logger.debug(f"Saved result for {config.index_name} to {path}")
        return path

    @staticmethod
    def load(path: Path) -> BenchmarkResult:
        """Read and validate one result file.

        Raises:
            ResultParseError: If the file cannot be read, is not JSON, or does
                not match the result schema.
        """
        try:
            with open(path, "rb") as f:
                data = orjson.loads(f.read())
        except OSError as e:
            raise ResultParseError(path, f"cannot read file: {e}") from e
        except orjson.JSONDecodeError as e:
            raise ResultParseError(path, f"invalid JSON: {e}") from e

        try:
            return BenchmarkResult.model_validate(data)
        except ValidationError as e:
            raise ResultParseError(
                path, f"{e.error_count()} schema error(s): {e.errors()[0]['msg']}"
            ) from e

    def list_result_files(self) -> list[Path]:
        """Result files in the store directory, sorted by name."""
        if not self.results_dir.is_dir():
            return []
        return sorted(
            p for p in self.results_dir.iterdir() if p.is_file() and is_result_file(p.name)
        )
