# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Run functions: drive one benchmark run and persist its result."""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from esbench.common.config.benchmark_config import BenchmarkConfig, IndexType
from esbench.common.exceptions import DriverLoadError
from esbench.orchestrator.models import RunFunction, RunOutcome
from esbench.persistence.models import (
    FullTextSearchResult,
    FuzzySearchResult,
    IndexingBatchResult,
    RawBenchmarkData,
    RawIndexingData,
    RawSearchData,
    RawUpdateData,
    UpdateBatchResult,
)

if TYPE_CHECKING:
    from esbench.persistence.result_store import ResultFileStore

logger = logging.getLogger(__name__)

__all__ = [
    "SimulatedWorkloadDriver",
    "WorkloadDriver",
    "create_benchmark_runner",
    "load_driver",
]

SIMULATED_DRIVER = "simulated"


@runtime_checkable
class WorkloadDriver(Protocol):
    """Executes the indexing, update and search phases of one run against a search engine."""

    def run(self, config: BenchmarkConfig) -> RawBenchmarkData: ...


def create_benchmark_runner(driver: WorkloadDriver, store: ResultFileStore) -> RunFunction:
    """Build a run function that drives one run and saves its result file."""

    def run_benchmark(config: BenchmarkConfig) -> RunOutcome:
        logger.debug(f"Running benchmark: {config.index_name}")
        raw = driver.run(config)
        path = store.save(raw)
        return RunOutcome.succeeded(path)

    return run_benchmark


class SimulatedWorkloadDriver:
    """Produces plausible timings without a search engine.

    Latencies scale with batch size and document length, and depend on the
    analyzer strategy. Noise is log-normal, so repeated runs of the same
    configuration differ the way real runs do.
    """

    # Relative cost of each analyzer compared to the standard one
    INDEX_COST = {
        IndexType.STANDARD: 1.0,
        IndexType.STEMMING: 1.25,
        IndexType.NGRAM: 1.9,
    }
    SEARCH_COST = {
        IndexType.STANDARD: 1.0,
        IndexType.STEMMING: 1.1,
        IndexType.NGRAM: 0.8,
    }

    PER_DOCUMENT_MS = 0.08
    PER_WORD_FACTOR = 0.02
    BATCH_OVERHEAD_MS = 4.0
    REFRESH_MS = 25.0
    SEARCH_BASE_MS = 3.0
    FUZZY_FACTOR = 1.6
    NOISE_SIGMA = 0.15

    def __init__(self, seed: int | None = None):
        self._rng = np.random.default_rng(seed)

    def _noisy(self, value: float) -> float:
        return round(float(value * self._rng.lognormal(0.0, self.NOISE_SIGMA)), 3)

    def _document_cost(self, config: BenchmarkConfig) -> float:
        total_words = sum(f.word_count for f in config.product_structure)
        return self.PER_DOCUMENT_MS * (1 + self.PER_WORD_FACTOR * total_words)

    def run(self, config: BenchmarkConfig) -> RawBenchmarkData:
        index_cost = self.INDEX_COST[config.index_type]
        document_cost = self._document_cost(config) * index_cost

        batch_results = [
            IndexingBatchResult(
                batch_number=n,
                documents_in_batch=config.documents_per_batch,
                indexing_time_ms=self._noisy(
                    self.BATCH_OVERHEAD_MS + config.documents_per_batch * document_cost
                ),
            )
            for n in range(1, config.number_of_batches + 1)
        ]

        update = config.update_config
        update_results = [
            UpdateBatchResult(
                batch_number=n,
                documents_in_batch=update.documents_per_update_batch,
                update_time_ms=self._noisy(
                    self.BATCH_OVERHEAD_MS
                    + update.documents_per_update_batch * document_cost * 1.3
                ),
            )
            for n in range(1, update.number_of_update_batches + 1)
        ]

        # Search latency grows slowly with the size of the index
        search_cost = (
            self.SEARCH_BASE_MS
            * self.SEARCH_COST[config.index_type]
            * (1 + np.log10(max(config.total_documents, 1)) / 4)
        )
        queries = config.search_queries
        full_text = [
            FullTextSearchResult(
                term=term,
                search_time_ms=self._noisy(search_cost),
                results_count=int(self._rng.integers(0, 11)),
                total_hits=int(self._rng.integers(0, config.total_documents + 1)),
            )
            for term in queries.full_text_search.terms
        ]
        fuzzy = [
            FuzzySearchResult(
                term=term,
                fuzziness=queries.fuzzy_search.fuzziness,
                search_time_ms=self._noisy(search_cost * self.FUZZY_FACTOR),
                results_count=int(self._rng.integers(0, 11)),
                total_hits=int(self._rng.integers(0, config.total_documents + 1)),
            )
            for term in queries.fuzzy_search.terms
        ]

        refresh_ms = self._noisy(self.REFRESH_MS)
        reindex_ms = self._noisy(self.REFRESH_MS)
        total_ms = (
            sum(b.indexing_time_ms for b in batch_results)
            + sum(b.update_time_ms for b in update_results)
            + sum(r.search_time_ms for r in full_text)
            + sum(r.search_time_ms for r in fuzzy)
            + refresh_ms
            + reindex_ms
        )

        return RawBenchmarkData(
            config=config,
            indexing_data=RawIndexingData(
                total_documents=config.total_documents,
                total_batches=config.number_of_batches,
                batch_results=batch_results,
                refresh_time_ms=refresh_ms,
            ),
            update_data=RawUpdateData(
                total_documents_updated=update.number_of_update_batches
                * update.documents_per_update_batch,
                total_update_batches=update.number_of_update_batches,
                update_batch_results=update_results,
                reindexing_time_ms=reindex_ms,
            ),
            search_data=RawSearchData(
                full_text_search_results=full_text,
                fuzzy_search_results=fuzzy,
            ),
            total_test_duration_ms=round(total_ms, 3),
        )


def load_driver(reference: str, seed: int | None = None) -> WorkloadDriver:
    """Resolve a driver reference.

    ``"simulated"`` gives a SimulatedWorkloadDriver. Anything else must be
    ``"package.module:factory"``, where ``factory()`` returns an object with a
    ``run(config)`` method.

    Raises:
        DriverLoadError: If the reference cannot be imported or does not
            produce a workload driver.
    """
    if reference == SIMULATED_DRIVER:
        return SimulatedWorkloadDriver(seed=seed)

    module_name, sep, attr = reference.partition(":")
    if not sep or not module_name or not attr:
        raise DriverLoadError(
            f"Invalid driver reference {reference!r}. "
            f"Use '{SIMULATED_DRIVER}' or 'package.module:factory'."
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise DriverLoadError(f"Cannot import driver module {module_name!r}: {e}") from e

    factory = getattr(module, attr, None)
    if factory is None:
        raise DriverLoadError(f"Module {module_name!r} has no attribute {attr!r}")

    if not callable(factory):
        raise DriverLoadError(f"{reference!r} is not callable")
    try:
        driver = factory()
    except Exception as e:
        raise DriverLoadError(f"Driver factory {reference!r} failed: {e}") from e

    if not isinstance(driver, WorkloadDriver):
        raise DriverLoadError(
            f"{reference!r} did not produce a workload driver (got {type(driver).__name__})"
        )

    logger.debug(f"Loaded workload driver {type(driver).__name__} from {reference}")
    return driver
