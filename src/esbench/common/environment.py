# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment variable overrides.

All settings are read from ``ESBENCH_*`` variables, for example
``ESBENCH_AGGREGATION_MAX_PARALLEL=12``.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from esbench.common.config.config_defaults import AggregationDefaults, OutputDefaults


class _EnvironmentSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ESBENCH_", extra="ignore")

    RESULTS_DIR: Path = Field(
        default=OutputDefaults.RESULTS_DIR,
        description="Directory where benchmark result files are written and read",
    )
    CACHE_FILE: Path | None = Field(
        default=None,
        description="Aggregation cache file. Defaults to <results-dir>/../cache/aggregations.json",
    )
    AGGREGATION_MAX_PARALLEL: int = Field(
        default=AggregationDefaults.MAX_PARALLEL,
        ge=1,
        description="Maximum number of result files read concurrently during aggregation",
    )


Environment = _EnvironmentSettings()
