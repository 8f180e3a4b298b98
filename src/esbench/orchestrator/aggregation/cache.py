# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""On-disk cache of a full aggregation pass.

The cache is keyed on the results directory and its modification time. Adding
or removing a result file bumps the directory mtime and invalidates it.
Editing a file in place does not, so ``clear-cache`` exists for that case.
"""

import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import orjson
from pydantic import BaseModel, Field, ValidationError

from esbench.common.config.base_config import CamelModel
from esbench.common.config.benchmark_config import SweepValue
from esbench.common.exceptions import CacheCorruptionError
from esbench.orchestrator.aggregation.models import Dataset, RawSampleSet

logger = logging.getLogger(__name__)

__all__ = [
    "AggregationCache",
    "CacheFile",
]


class _CachedSamples(BaseModel):
    indexing: list[float] = Field(default_factory=list)
    search: list[float] = Field(default_factory=list)
    update: list[float] = Field(default_factory=list)
    total: list[float] = Field(default_factory=list)
    timestamps: list[str] = Field(default_factory=list)


class _CachedValue(BaseModel):
    value: SweepValue
    samples: _CachedSamples


class _CachedDataset(BaseModel):
    name: str
    variable: str
    values: list[_CachedValue]


class CacheFile(CamelModel):
    """Layout of the cache side file."""

    source_dir: str
    source_dir_last_modified: float
    created_at: str
    total_files: int
    datasets: list[_CachedDataset]


def _directory_mtime(directory: Path) -> float:
    return directory.stat().st_mtime


class AggregationCache:
    """Reads and atomically replaces the aggregation cache file."""

    def __init__(self, cache_file: Path, logger: logging.Logger | None = None):
        self.cache_file = Path(cache_file)
        self.logger = logger or logging.getLogger(__name__)

    def _read(self) -> CacheFile:
        try:
            with open(self.cache_file, "rb") as f:
                return CacheFile.model_validate(orjson.loads(f.read()))
        except (OSError, orjson.JSONDecodeError, ValidationError) as e:
            raise CacheCorruptionError(f"Unusable aggregation cache {self.cache_file}: {e}") from e

    def load(self, source_dir: Path) -> dict[str, Dataset] | None:
        """Return the cached datasets for ``source_dir``, or None on a miss.

        A missing, corrupt, stale or foreign cache is a miss.
        """
        if not self.cache_file.is_file():
            return None

        try:
            cached = self._read()
        except CacheCorruptionError as e:
            self.logger.warning(f"{e}. Rebuilding.")
            return None

        if cached.source_dir != str(Path(source_dir).resolve()):
            self.logger.debug(f"Cache was built for {cached.source_dir}, not {source_dir}")
            return None

        current_mtime = _directory_mtime(Path(source_dir))
        if cached.source_dir_last_modified < current_mtime:
            self.logger.debug("Results directory changed since the cache was written")
            return None

        datasets: dict[str, Dataset] = {}
        for entry in cached.datasets:
            dataset = Dataset(name=entry.name, variable=entry.variable)
            for point in entry.values:
                dataset.samples[point.value] = RawSampleSet(**point.samples.model_dump())
            datasets[entry.name] = dataset

        self.logger.info(f"Loaded {len(datasets)} chart dataset(s) from cache {self.cache_file}")
        return datasets

    def save(
        self,
        source_dir: Path,
        source_dir_mtime: float,
        datasets: dict[str, Dataset],
        total_files: int,
    ) -> None:
        """Replace the cache file. Failures are logged, never raised.

        ``source_dir_mtime`` must be read before the results were scanned so a
        file added mid-scan still invalidates the cache.
        """
        payload = {
            "sourceDir": str(Path(source_dir).resolve()),
            "sourceDirLastModified": source_dir_mtime,
            "createdAt": datetime.now(timezone.utc).isoformat(),
            "totalFiles": total_files,
            "datasets": [dataset.to_json_dict() for dataset in datasets.values()],
        }

        tmp_name: str | None = None
        try:
            self.cache_file.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "wb",
                dir=self.cache_file.parent,
                prefix=f".{self.cache_file.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2))
            os.replace(tmp_name, self.cache_file)
            tmp_name = None
            self.logger.info(f"Saved {len(datasets)} chart dataset(s) to cache")
        except (OSError, TypeError) as e:
            self.logger.warning(f"Failed to save aggregation cache {self.cache_file}: {e}")
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

    def clear(self) -> bool:
        """Delete the cache file. Returns whether one existed."""
        try:
            self.cache_file.unlink()
        except FileNotFoundError:
            return False
        self.logger.info(f"Removed aggregation cache {self.cache_file}")
        return True
