# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Streaming reduction of a result directory into chart datasets."""

import asyncio
import logging
import time
from pathlib import Path

from esbench.common.config.config_defaults import AggregationDefaults
from esbench.common.exceptions import ResultParseError
from esbench.orchestrator.aggregation.cache import AggregationCache
from esbench.orchestrator.aggregation.extraction import (
    calculate_search_average,
    extract_sweep_info,
)
from esbench.orchestrator.aggregation.models import Dataset
from esbench.persistence.models import BenchmarkResult
from esbench.persistence.result_store import ResultFileStore

__all__ = [
    "StreamAggregator",
    "default_cache_file",
]


def default_cache_file(results_dir: Path) -> Path:
    """``<results_dir>/../cache/aggregations.json``"""
    return Path(results_dir).parent / "cache" / AggregationDefaults.CACHE_FILE_NAME


def _format_eta(seconds: float) -> str:
    seconds = int(round(seconds))
    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        return f"{seconds // 60}m {seconds % 60}s"
    return f"{seconds // 3600}h {(seconds % 3600) // 60}m"


class StreamAggregator:
    """Reduces every ``benchmark_*.json`` file of a directory into datasets.

    Files are read in chunks of ``max_parallel``: reads within a chunk run
    concurrently in worker threads, chunks run one after another. Parsed
    results are merged on the event loop thread, in file-name order.

    A full pass is cached next to the results and reused while the results
    directory is unchanged.
    """

    def __init__(
        self,
        max_parallel: int = AggregationDefaults.MAX_PARALLEL,
        enable_cache: bool = AggregationDefaults.ENABLE_CACHE,
        cache_file: Path | None = None,
        logger: logging.Logger | None = None,
    ):
        """Initialize StreamAggregator.

        Args:
            max_parallel: Maximum number of files read at once (must be >= 1)
            enable_cache: Read and write the aggregation cache
            cache_file: Cache location (defaults to ``<results_dir>/../cache/aggregations.json``)
            logger: Logger to report progress on (defaults to this module's)

        Raises:
            ValueError: If max_parallel < 1
        """
        if max_parallel < 1:
            raise ValueError(
                f"Invalid max_parallel: {max_parallel}. At least one file must be read at a time."
            )
        self.max_parallel = max_parallel
        self.enable_cache = enable_cache
        self.cache_file = Path(cache_file) if cache_file is not None else None
        self.logger = logger or logging.getLogger(__name__)

        self.files_read = 0
        self.files_skipped = 0

    def _cache_for(self, results_dir: Path) -> AggregationCache:
        return AggregationCache(
            self.cache_file or default_cache_file(results_dir), logger=self.logger
        )

    def reduce(self, results_dir: Path) -> dict[str, Dataset]:
        """Synchronous entry point; see process_all_results."""
        return asyncio.run(self.process_all_results(results_dir))

    async def process_all_results(self, results_dir: Path) -> dict[str, Dataset]:
        """Reduce ``results_dir`` into datasets keyed by dataset name.

        Returns the cached reduction without reading any result file when the
        cache is valid. Otherwise every file is read again and the cache is
        rewritten. Unreadable files are logged and skipped.
        """
        results_dir = Path(results_dir)
        self.files_read = 0
        self.files_skipped = 0

        if not results_dir.is_dir():
            self.logger.warning(f"Results directory {results_dir} does not exist")
            return {}

        cache = self._cache_for(results_dir) if self.enable_cache else None
        if cache is not None:
            cached = cache.load(results_dir)
            if cached is not None:
                return cached

        # Read before scanning so files landing mid-scan invalidate the cache
        source_mtime = results_dir.stat().st_mtime
        files = ResultFileStore(results_dir).list_result_files()

        self.logger.info(
            f"Processing {len(files)} result file(s) with up to {self.max_parallel} parallel reads"
        )
        start = time.perf_counter()
        datasets: dict[str, Dataset] = {}

        for offset in range(0, len(files), self.max_parallel):
            chunk = files[offset : offset + self.max_parallel]
            results = await asyncio.gather(*(self._load(path) for path in chunk))
            for result in results:
                if result is not None:
                    self._merge(datasets, result)
            self._log_progress(offset, offset + len(chunk), len(files), start)

        elapsed = time.perf_counter() - start
        self.logger.info(
            f"Aggregated {self.files_read} file(s) into {len(datasets)} chart dataset(s) "
            f"in {elapsed:.2f}s ({self.files_skipped} skipped)"
        )

        if cache is not None:
            cache.save(results_dir, source_mtime, datasets, total_files=len(files))
        return datasets

    async def _load(self, path: Path) -> BenchmarkResult | None:
        self.files_read += 1
        try:
            return await asyncio.to_thread(ResultFileStore.load, path)
        except ResultParseError as e:
            self.files_skipped += 1
            self.logger.warning(f"Skipping {path.name}: {e.reason}")
            return None

    def _merge(self, datasets: dict[str, Dataset], result: BenchmarkResult) -> None:
        info = extract_sweep_info(result)
        if info is None:
            self.logger.debug(f"{result.test_id} has no dataset name; ignored")
            return

        dataset = datasets.get(info.chart_name)
        if dataset is None:
            dataset = datasets[info.chart_name] = Dataset(
                name=info.chart_name, variable=info.variable
            )
        elif dataset.variable != info.variable:
            self.logger.warning(
                f"{result.test_id} sweeps {info.variable} but dataset "
                f"'{info.chart_name}' sweeps {dataset.variable}; grouped anyway"
            )

        dataset.sample_set(info.value).add(
            indexing=result.indexing_metrics.total_indexing_time_ms,
            search=calculate_search_average(result.search_metrics),
            update=result.update_metrics.total_update_time_ms,
            total=result.total_test_duration_ms,
            timestamp=result.timestamp,
        )

    def _log_progress(self, before: int, done: int, total: int, start: float) -> None:
        interval = AggregationDefaults.PROGRESS_LOG_INTERVAL
        if done // interval == before // interval and done != total:
            return
        elapsed = time.perf_counter() - start
        rate = done / elapsed if elapsed > 0 else float(done)
        remaining = (total - done) / rate if rate > 0 else 0.0
        self.logger.debug(
            f"Progress: {done / total * 100:.1f}% ({done}/{total}) | "
            f"{rate:.1f} files/s | ETA: {_format_eta(remaining)}"
        )
